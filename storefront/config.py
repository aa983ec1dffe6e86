"""
Storefront configuration.

All settings come from environment variables so the same build runs locally
and on Vercel.
"""

import os

# Supabase (catalog source)
SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
SUPABASE_ANON_KEY = os.environ.get("SUPABASE_ANON_KEY", "")

# Outbound inquiry channel
MESSENGER_PAGE = os.environ.get("MESSENGER_PAGE", "Botika.RBT")
MESSENGER_BASE_URL = os.environ.get("MESSENGER_BASE_URL", "https://m.me")

# Store presentation
STORE_NAME = os.environ.get("STORE_NAME", "Botika RBT")
CURRENCY = os.environ.get("CURRENCY", "PHP")

# Sessions
SESSION_HEADER = os.environ.get("SESSION_HEADER", "X-Session-Id")
SESSION_IDLE_TIMEOUT = int(os.environ.get("SESSION_IDLE_TIMEOUT", "7200"))  # seconds

# CORS
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("ALLOWED_ORIGINS", "*").split(",")
    if origin.strip()
]
