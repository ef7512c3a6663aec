import logging
import os

from dotenv import load_dotenv

from vendor_functions import Settings, create_app

# Load GOOGLE_MAPS_API_KEY, SUPABASE_URL, ADMIN_TOKENS, ... from .env
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = create_app(Settings.from_env())

if __name__ == "__main__":
    app.run(host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", 8788)))
