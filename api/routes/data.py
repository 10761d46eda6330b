"""
Data Query Route
"""
import logging
from typing import Any, Tuple

from api.config import get_settings
from api.database import DataApiManager
from api.errors import QueryError
from api.models import InboundRequest

logger = logging.getLogger(__name__)


def query_data(request: InboundRequest, db: DataApiManager) -> Tuple[int, Any]:
    """
    Run the configured statement
    Returns: (status_code, response_body)
    """
    settings = get_settings()

    # Not bound into the statement yet
    if request.query_parameters:
        logger.debug(f"Ignoring query parameters: {sorted(request.query_parameters)}")

    try:
        rows = db.query(settings.data_query_sql)
    except QueryError as e:
        logger.error(f"Error querying database: {e}", exc_info=e.__cause__ or e)
        return e.status_code, e.to_body()

    return 200, {"data": rows}
