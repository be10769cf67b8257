from typing import Any, Dict, Optional

from app.repositories.store import store_call


@store_call
def fetch_profile(supabase, user_id: str) -> Optional[Dict[str, Any]]:
    response = supabase.table("profiles").select("*").eq("id", user_id).limit(1).execute()
    return response.data[0] if response.data else None
