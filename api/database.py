"""
Aurora Data API Query Layer
"""
import logging
from typing import Optional, Dict, Any, List

from botocore.exceptions import BotoCoreError, ClientError

from .aws import create_client
from .config import get_settings
from .errors import QueryError
from .models import QueryResult, QueryRow

logger = logging.getLogger(__name__)

# Checked in this order; the service sets at most one per field
FIELD_VALUE_KEYS = ("stringValue", "longValue", "doubleValue", "booleanValue")


class DataApiManager:
    """Runs SQL statements through the RDS Data API"""

    def __init__(self, client=None, cluster_arn: Optional[str] = None,
                 secret_arn: Optional[str] = None, database: Optional[str] = None):
        settings = get_settings()
        self.cluster_arn = cluster_arn or settings.db_cluster_arn
        self.secret_arn = secret_arn or settings.db_secret_arn
        self.database = database or settings.db_name
        self.client = client or create_client("rds-data", settings.rds_data_endpoint_url)

    def query(self, sql: str, parameters: Optional[Dict[str, Any]] = None) -> QueryResult:
        """
        Execute a statement and return one dict per record
        Named parameters are bound by the service, never interpolated into sql
        """
        logger.info(f"Executing query: {sql}")

        request = {
            "resourceArn": self.cluster_arn,
            "secretArn": self.secret_arn,
            "sql": sql,
            "includeResultMetadata": True,
        }
        if self.database:
            request["database"] = self.database
        if parameters:
            request["parameters"] = to_sql_parameters(parameters)

        try:
            response = self.client.execute_statement(**request)
        except (BotoCoreError, ClientError) as e:
            raise QueryError(f"ExecuteStatement failed: {e}") from e

        return records_to_rows(response.get("records", []), response.get("columnMetadata", []))


# ============ HELPERS ============

def extract_field_value(field: Dict[str, Any]) -> Any:
    """Map a Data API Field to a plain scalar, None when no typed value is set"""
    for key in FIELD_VALUE_KEYS:
        if field.get(key) is not None:
            return field[key]
    return None


def records_to_rows(records: List[List[Dict[str, Any]]],
                    columns: List[Dict[str, Any]]) -> QueryResult:
    """Zip column names with each record's positional fields"""
    names = [column["name"] for column in columns]

    rows = []
    for record in records:
        row: QueryRow = {}
        for i, name in enumerate(names):
            field = record[i] if i < len(record) else {}
            row[name] = extract_field_value(field)
        rows.append(row)

    return rows


def to_sql_parameters(parameters: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Convert {name: value} into Data API SqlParameter entries"""
    converted = []

    for name, value in parameters.items():
        if value is None:
            typed = {"isNull": True}
        # bool is an int subclass
        elif isinstance(value, bool):
            typed = {"booleanValue": value}
        elif isinstance(value, int):
            typed = {"longValue": value}
        elif isinstance(value, float):
            typed = {"doubleValue": value}
        elif isinstance(value, str):
            typed = {"stringValue": value}
        else:
            raise QueryError(f"Unsupported parameter type for {name}: {type(value).__name__}")

        converted.append({"name": name, "value": typed})

    return converted


# Global instance
_db_manager: Optional[DataApiManager] = None


def get_db() -> DataApiManager:
    """Get the database manager instance"""
    global _db_manager
    if _db_manager is None:
        _db_manager = DataApiManager()
    return _db_manager
