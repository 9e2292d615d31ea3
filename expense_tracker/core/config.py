from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App settings
    PROJECT_NAME: str = "SmartExpenseTracker"
    API_PREFIX: str = "/api"
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")
    CORS_ORIGINS: List[str] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:5173",
            "http://localhost:8000",
        ]
    )

    # Storage: "memory" keeps everything in-process, "dynamo" uses DynamoDB
    STORAGE_BACKEND: str = Field(default="memory")

    # DynamoDB
    DYNAMO_REGION: str = Field(default="eu-west-1")
    DYNAMO_INCOMES_TABLE: str = Field(default="smart-expense-incomes")
    DYNAMO_EXPENSES_TABLE: str = Field(default="smart-expense-expenses")

    # Analytics
    CURRENCY_SYMBOL: str = "₹"
    TREND_MONTHS: int = 6
    RECENT_TRANSACTIONS_LIMIT: int = 20

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)


settings = Settings()
