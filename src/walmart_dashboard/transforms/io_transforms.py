from google.cloud import storage
from google.api_core import exceptions as gcs_exceptions
from google.auth import exceptions as auth_exceptions
from pathlib import Path
import logging


class DatasetLoadError(RuntimeError):
    """Raised when the sales snapshot cannot be fetched or parsed at all."""


def split_gcs_uri(uri):
    """Split a gs://bucket/blob URI into its bucket and blob names"""
    bucket_name, _, blob_name = uri[len("gs://"):].partition("/")
    if not bucket_name or not blob_name:
        raise DatasetLoadError(f"Malformed GCS URI: {uri}")
    return bucket_name, blob_name


def fetch_csv_text(path, encoding="utf-8-sig"):
    """Fetch the whole CSV snapshot as text from a local path or a GCS URI.

    Any failure to retrieve the resource is raised as DatasetLoadError so the
    caller can move the dashboard into its failed state.
    """
    if str(path).startswith("gs://"):
        return _fetch_from_gcs(str(path), encoding)

    logging.info(f"Reading sales data from local file {path}")
    try:
        return Path(path).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"Error reading {path}: {e}")
        raise DatasetLoadError(f"Could not read {path}: {e}") from e


def _fetch_from_gcs(uri, encoding):
    bucket_name, blob_name = split_gcs_uri(uri)
    logging.info(f"Downloading {blob_name} from bucket {bucket_name}")
    try:
        client = storage.Client()
        blob = client.bucket(bucket_name).blob(blob_name)
        return blob.download_as_text(encoding=encoding)
    except (gcs_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError) as e:
        logging.error(f"Error downloading {uri}: {e}")
        raise DatasetLoadError(f"Could not download {uri}: {e}") from e
