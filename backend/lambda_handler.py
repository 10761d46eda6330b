"""
AWS Lambda Handler for the Bedrock / Data API service
This is the entry point for AWS Lambda - delegates to the api module
"""
from api.main import handler as api_handler


def lambda_handler(event, context):
    """AWS Lambda entry point"""
    return api_handler(event, context)


# Also export as 'handler' for SAM template compatibility
handler = lambda_handler
