"""S3 reader for the site's static JSON documents."""
import json
import logging
from typing import Any

import boto3

logger = logging.getLogger(__name__)


class S3AssetStore:
    """Reads JSON documents published to the site's asset bucket."""

    def __init__(self, bucket_name: str, prefix: str = ''):
        """
        Initialize the S3 client.

        Args:
            bucket_name: Bucket holding the site's static assets
            prefix: Key prefix of the JSON documents (e.g. "public/")
        """
        self.bucket_name = bucket_name
        self.prefix = prefix
        self.s3 = boto3.client('s3')
        logger.info(f"Initialized S3AssetStore for bucket: {bucket_name}")

    def key_for(self, document: str) -> str:
        return f"{self.prefix}{document}"

    def get_json(self, document: str) -> Any:
        """
        Read and decode a JSON document.

        Args:
            document: Document name, e.g. "events.json"

        Returns:
            Decoded JSON payload

        Raises:
            botocore.exceptions.ClientError: If the object cannot be read
            ValueError: If the object is not valid JSON
        """
        key = self.key_for(document)
        logger.info(f"Reading s3://{self.bucket_name}/{key}")
        response = self.s3.get_object(Bucket=self.bucket_name, Key=key)
        body = response['Body'].read()
        return json.loads(body.decode('utf-8'))
