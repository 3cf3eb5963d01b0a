"""
Tests for the image hosting client (HTTP calls are mocked)
"""
from unittest.mock import MagicMock, patch

import pytest
import requests
from django.core.exceptions import ImproperlyConfigured
from django.core.files.uploadedfile import SimpleUploadedFile

from club.checks import cloudinary_configured
from club.cloudinary import CloudinaryClient, UploadResult, upload_image
from club.exceptions import ImageUploadError


@pytest.fixture
def cloudinary_settings(settings):
    settings.CLOUDINARY_CLOUD_NAME = 'club-cloud'
    settings.CLOUDINARY_UPLOAD_PRESET = 'club-preset'
    return settings


@pytest.fixture
def photo():
    return SimpleUploadedFile('team.jpg', b'\xff\xd8\xff\xe0fake-jpeg', content_type='image/jpeg')


def ok_response(payload):
    response = MagicMock()
    response.ok = True
    response.status_code = 200
    response.json.return_value = payload
    return response


class TestConfiguration:

    def test_missing_configuration(self, settings):
        settings.CLOUDINARY_CLOUD_NAME = ''
        settings.CLOUDINARY_UPLOAD_PRESET = ''

        with pytest.raises(ImproperlyConfigured):
            CloudinaryClient()

    def test_explicit_arguments_win(self, cloudinary_settings):
        client = CloudinaryClient(cloud_name='other', upload_preset='p')

        assert client.upload_url == 'https://api.cloudinary.com/v1_1/other/image/upload'


class TestUpload:

    def test_upload_success(self, cloudinary_settings, photo):
        payload = {'secure_url': 'https://res.cloudinary.com/club-cloud/image/upload/v1/abc.jpg', 'public_id': 'abc'}

        with patch('club.cloudinary.requests.post', return_value=ok_response(payload)) as mock_post:
            result = CloudinaryClient().upload(photo)

        assert result == UploadResult(secure_url=payload['secure_url'], public_id='abc')
        args, kwargs = mock_post.call_args
        assert args[0] == 'https://api.cloudinary.com/v1_1/club-cloud/image/upload'
        assert kwargs['data'] == {'upload_preset': 'club-preset'}
        assert kwargs['files']['file'][0] == 'team.jpg'
        assert kwargs['files']['file'][2] == 'image/jpeg'

    def test_rejected_upload(self, cloudinary_settings, photo):
        response = MagicMock(ok=False, status_code=400, text='Upload preset not found')

        with patch('club.cloudinary.requests.post', return_value=response):
            with pytest.raises(ImageUploadError, match='Failed to upload image to Cloudinary'):
                CloudinaryClient().upload(photo)

    def test_network_error(self, cloudinary_settings, photo):
        with patch('club.cloudinary.requests.post', side_effect=requests.exceptions.ConnectionError('down')):
            with pytest.raises(ImageUploadError):
                CloudinaryClient().upload(photo)

    def test_upload_image_helper(self, cloudinary_settings, photo):
        payload = {'secure_url': 'https://example.com/x.jpg', 'public_id': 'x'}

        with patch('club.cloudinary.requests.post', return_value=ok_response(payload)):
            assert upload_image(photo).public_id == 'x'


class TestBuildUrl:

    @pytest.mark.parametrize('width, height, expected', [
        (None, None, 'https://res.cloudinary.com/club-cloud/image/upload/players/abc'),
        (200, None, 'https://res.cloudinary.com/club-cloud/image/upload/w_200,c_fill/players/abc'),
        (200, 150, 'https://res.cloudinary.com/club-cloud/image/upload/w_200,h_150,c_fill/players/abc'),
        (None, 150, 'https://res.cloudinary.com/club-cloud/image/upload/h_150,c_fill/players/abc'),
    ])
    def test_build_url(self, cloudinary_settings, width, height, expected):
        assert CloudinaryClient().build_url('players/abc', width=width, height=height) == expected


class TestConfigurationCheck:

    def test_warns_when_unset(self, settings):
        settings.CLOUDINARY_CLOUD_NAME = ''
        settings.CLOUDINARY_UPLOAD_PRESET = 'club-preset'

        warnings = cloudinary_configured(None)

        assert [w.id for w in warnings] == ['club.W001']
        assert 'CLOUDINARY_CLOUD_NAME' in warnings[0].msg

    def test_silent_when_configured(self, cloudinary_settings):
        assert cloudinary_configured(None) == []
