import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
	APP_NAME = os.getenv("APP_NAME", "Marketplace API")
	DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./marketplace.db")

	SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "sid")
	SESSION_IDLE_SECONDS = int(os.getenv("SESSION_IDLE_SECONDS", "60"))
	SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "false").lower() == "true"

	ALLOW_ORIGINS = [o.strip() for o in os.getenv("ALLOW_ORIGINS", "http://localhost:3000").split(",") if o.strip()]

	HOST = os.getenv("HOST", "0.0.0.0")
	PORT = int(os.getenv("PORT", "3000"))

settings = Settings()
