"""
API Configuration loaded from the Lambda environment
"""
import os
from functools import lru_cache
from typing import Optional


def _env_bool(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() == "true"


class Settings:
    """Application settings loaded from environment"""

    def __init__(self):
        # AWS settings
        self.aws_region: str = os.environ.get("AWS_REGION", "us-east-1")
        self.aws_max_attempts: int = int(os.environ.get("AWS_MAX_ATTEMPTS", "1"))
        self.aws_connect_timeout: int = int(os.environ.get("AWS_CONNECT_TIMEOUT", "5"))
        self.aws_read_timeout: int = int(os.environ.get("AWS_READ_TIMEOUT", "60"))

        # Bedrock settings
        self.bedrock_model_id: str = os.environ.get("BEDROCK_MODEL_ID",
                                                    "anthropic.claude-3-haiku-20240307-v1:0")
        self.bedrock_endpoint_url: Optional[str] = os.environ.get("BEDROCK_ENDPOINT_URL")

        # Database settings (RDS Data API, credentials resolved by the service)
        self.db_cluster_arn: str = os.environ.get("DB_CLUSTER_ARN", "")
        self.db_secret_arn: str = os.environ.get("DB_SECRET_ARN", "")
        self.db_name: Optional[str] = os.environ.get("DB_NAME") or None
        self.rds_data_endpoint_url: Optional[str] = os.environ.get("RDS_DATA_ENDPOINT_URL")
        self.data_query_sql: str = os.environ.get("DATA_QUERY_SQL", "SELECT * FROM your_table LIMIT 10")

        # HTTP settings
        self.stage_name: Optional[str] = os.environ.get("STAGE_NAME") or None
        self.expose_error_details: bool = _env_bool("EXPOSE_ERROR_DETAILS", "true")

        self.log_level: str = os.environ.get("LOG_LEVEL", "INFO").upper()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
