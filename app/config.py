import os

from dotenv import load_dotenv

load_dotenv()

SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")

FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")

FEED_MAX_PAGE_SIZE = 50


def clamp_page_size(value: str) -> int:
    # The feed default must stay within what ?limit= accepts
    return min(max(int(value), 1), FEED_MAX_PAGE_SIZE)


# Public feed page size
FEED_PAGE_SIZE = clamp_page_size(os.getenv("FEED_PAGE_SIZE", "10"))

SIGNIN_PATH = "/auth/signin"
SIGNUP_PATH = "/auth/signup"

DEBUG = os.getenv("DEBUG", "False").lower() in ["true", "1", "t"]
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()
