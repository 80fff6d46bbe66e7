from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Projections are pure, so identical inputs can share a cached result
    projection_cache_size: int = 256

    # Payoff ladder runs are independent; 1 evaluates them sequentially
    payoff_max_workers: int = 1

    # Extra monthly principal payments tried by the payoff optimizer
    payoff_extra_payments: list[int] = [
        0, 100, 250, 500, 750, 1000, 1500, 2000,
        3000, 4000, 5000, 6000, 7000, 8000, 9000, 10000,
    ]


settings = Settings()
