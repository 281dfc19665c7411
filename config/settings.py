import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def _env_list(name: str, default: str) -> list:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


class Settings:
    # Application Info
    APP_NAME: str = "Foresyte Waitlist"
    VERSION: str = "1.0.0"

    def __init__(self):
        # Environment
        self.ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
        self.DEBUG: bool = _env_bool("DEBUG", "True")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Server Configuration
        self.HOST: str = os.getenv("HOST", "127.0.0.1")
        self.PORT: int = int(os.getenv("PORT", 5001))

        # CORS
        self.CORS_ORIGINS: list = _env_list("CORS_ORIGINS", "*")

        # Waitlist form
        self.WAITLIST_API_URL: str = os.getenv(
            "WAITLIST_API_URL", f"http://{self.HOST}:{self.PORT}/api/waitlist"
        )
        self.WAITLIST_CONFIRMATION_DELAY_SECONDS: float = float(
            os.getenv("WAITLIST_CONFIRMATION_DELAY_SECONDS", 2.0)
        )
        self.WAITLIST_REQUEST_TIMEOUT_SECONDS: float = float(
            os.getenv("WAITLIST_REQUEST_TIMEOUT_SECONDS", 10.0)
        )

    def validate(self):
        """Reject unsafe settings when running in production"""
        if self.is_production():
            if self.DEBUG:
                raise ValueError("DEBUG must be disabled in production!")

            if "*" in self.CORS_ORIGINS:
                raise ValueError("Please set explicit CORS_ORIGINS for production!")

    def get_cors_config(self) -> dict:
        """Get flask-cors resource configuration"""
        return {
            r"/api/*": {"origins": self.CORS_ORIGINS},
        }

    def is_development(self) -> bool:
        """Check if running in development mode"""
        return self.ENVIRONMENT.lower() == "development"

    def is_production(self) -> bool:
        """Check if running in production mode"""
        return self.ENVIRONMENT.lower() == "production"

    def config_summary(self) -> dict:
        """Configuration summary (safe for logging)"""
        return {
            "app": f"{self.APP_NAME} v{self.VERSION}",
            "environment": self.ENVIRONMENT,
            "server": f"{self.HOST}:{self.PORT}",
            "debug": self.DEBUG,
            "cors_origins": self.CORS_ORIGINS,
            "waitlist_api_url": self.WAITLIST_API_URL,
            "confirmation_delay": self.WAITLIST_CONFIRMATION_DELAY_SECONDS,
        }

# Create global settings instance
settings = Settings()
