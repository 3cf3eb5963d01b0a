"""
Cloudinary image hosting wrapper
Documentation: https://cloudinary.com/documentation/image_upload_api_reference

Uploads are unsigned and go through an upload preset, so no API secret is
needed on the server.
"""

import logging
from dataclasses import dataclass

import requests
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from club.exceptions import ImageUploadError

logger = logging.getLogger(__name__)


@dataclass
class UploadResult:
    secure_url: str
    public_id: str


class CloudinaryClient:
    def __init__(self, cloud_name=None, upload_preset=None, timeout=30):
        """
        Args:
            cloud_name: Cloudinary cloud (defaults to settings.CLOUDINARY_CLOUD_NAME)
            upload_preset: unsigned upload preset (defaults to settings.CLOUDINARY_UPLOAD_PRESET)
            timeout: seconds before an upload request is abandoned
        """
        self.cloud_name = cloud_name or settings.CLOUDINARY_CLOUD_NAME
        self.upload_preset = upload_preset or settings.CLOUDINARY_UPLOAD_PRESET
        if not self.cloud_name or not self.upload_preset:
            raise ImproperlyConfigured(
                "CLOUDINARY_CLOUD_NAME and CLOUDINARY_UPLOAD_PRESET must be set to upload images"
            )

        self.timeout = timeout
        self.upload_url = f"https://api.cloudinary.com/v1_1/{self.cloud_name}/image/upload"
        self.delivery_base = f"https://res.cloudinary.com/{self.cloud_name}/image/upload"

    def upload(self, file):
        """
        Upload an image file

        Args:
            file: an uploaded file (anything with .name and .read())

        Returns:
            UploadResult with the https URL and the public id of the stored image
        """
        name = getattr(file, 'name', None) or 'upload'
        content_type = getattr(file, 'content_type', None) or 'application/octet-stream'

        try:
            response = requests.post(
                self.upload_url,
                data={'upload_preset': self.upload_preset},
                files={'file': (name, file, content_type)},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error("Image upload to %s failed: %s", self.upload_url, e)
            raise ImageUploadError('Failed to upload image to Cloudinary') from e

        if not response.ok:
            logger.error("Image upload rejected (%s): %s", response.status_code, response.text[:200])
            raise ImageUploadError('Failed to upload image to Cloudinary')

        data = response.json()
        logger.info("Uploaded image %s", data.get('public_id'))
        return UploadResult(secure_url=data['secure_url'], public_id=data['public_id'])

    def build_url(self, public_id, width=None, height=None):
        """Delivery URL, cropped to fill width/height when given"""
        parts = []
        if width:
            parts.append(f"w_{width}")
        if height:
            parts.append(f"h_{height}")

        if parts:
            parts.append('c_fill')
            return f"{self.delivery_base}/{','.join(parts)}/{public_id}"
        return f"{self.delivery_base}/{public_id}"


def upload_image(file):
    """Upload with the configured client"""
    return CloudinaryClient().upload(file)
