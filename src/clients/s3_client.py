import boto3
import io
import logging
import time
import streamlit as st
from concurrent.futures import ThreadPoolExecutor
from typing import Tuple, List
from botocore.client import Config
from streamlit.runtime.uploaded_file_manager import UploadedFile
from utils.constants import MAX_UPLOAD_WORKERS
from utils.s3_utils import make_photo_key, detect_content_type
from config.config import SETTINGS

logger = logging.getLogger(__name__)


@st.cache_resource(show_spinner=False)
def _get_s3_client(region: str):
    return boto3.client(
        "s3", region_name=region, config=Config(s3={"addressing_style": "virtual"})
    )


class S3Client:
    def __init__(self, bucket: str | None = None, s3=None):
        self.bucket = bucket or SETTINGS.s3_bucket
        assert self.bucket, "S3 bucket not found."
        self.s3 = s3 or _get_s3_client(SETTINGS.aws_region)

    def public_url(self, key: str) -> str:
        return f"https://{self.bucket}.s3.amazonaws.com/{key}"

    def upload_file(self, key: str, uploaded_file: UploadedFile) -> Tuple[str, str]:
        content_type = uploaded_file.type or detect_content_type(uploaded_file.name)
        uploaded_file.seek(0)
        data = uploaded_file.getvalue()
        extra = {"ContentType": content_type}
        self.s3.upload_fileobj(
            Fileobj=io.BytesIO(data), Bucket=self.bucket, Key=key, ExtraArgs=extra
        )
        return key, self.public_url(key)

    def upload_photos(self, marker_id: str, files: List[UploadedFile]) -> List[str]:
        """Upload photos concurrently and return their URLs in selection order."""
        if not files:
            return []
        timestamp_ms = int(time.time() * 1000)
        keys = [
            make_photo_key(marker_id, index, file, timestamp_ms)
            for index, file in enumerate(files)
        ]
        with ThreadPoolExecutor(max_workers=min(len(files), MAX_UPLOAD_WORKERS)) as pool:
            results = list(pool.map(self.upload_file, keys, files))
        logger.info(f"Uploaded {len(results)} photo(s) for marker {marker_id}")
        return [url for _, url in results]
