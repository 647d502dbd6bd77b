import os

class Settings:
    # Server
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8085"))

    # Fan-out: 0 means one in-flight fetch per URL, no ceiling
    MAX_CONCURRENCY: int = int(os.getenv("MAX_CONCURRENCY", "0"))

    # Fetching
    USER_AGENT: str = os.getenv("USER_AGENT", "multifetch/1.0")
    VERSIONS_URL: str = os.getenv(
        "VERSIONS_URL", "https://ddragon.leagueoflegends.com/api/versions.json"
    )

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def validate(self) -> None:
        """Reject values that would make every request fail"""
        if self.MAX_CONCURRENCY < 0:
            raise ValueError(f"MAX_CONCURRENCY must be >= 0, got {self.MAX_CONCURRENCY}")

settings = Settings()
