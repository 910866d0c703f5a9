import os
import sys
import pytest

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT_DIR)

from moodle_url import SiteInterface, get_vimeo_player_url, is_vimeo_video_url

PLAYER_URL = 'https://school.edu/media/player/vimeo/wsplayer.php?video=12345&token=abc'


class FakeSite:
    def __init__(self, url='https://school.edu', token='abc'):
        self.url = url
        self.token = token

    def get_url(self):
        return self.url

    def get_token(self):
        return self.token


def test_fake_site_is_site_interface():
    assert isinstance(FakeSite(), SiteInterface)


@pytest.mark.parametrize("url,expected", [
    ('https://player.vimeo.com/video/12345', True),
    ('http://player.vimeo.com/video/1?autoplay=1', True),
    ('https://vimeo.com/12345', False),
    ('https://player.vimeo.com/video/', False),
    (None, False),
])
def test_is_vimeo_video_url(url, expected):
    assert is_vimeo_video_url(url) is expected


@pytest.mark.parametrize("url,expected", [
    ('https://player.vimeo.com/video/12345', PLAYER_URL),
    ('https://player.vimeo.com/video/12345?h=ab12cd', PLAYER_URL + '&h=ab12cd'),
    ('https://player.vimeo.com/video/12345/ab12cd', PLAYER_URL + '&h=ab12cd'),
    ('https://player.vimeo.com/video/12345&h=ab12cd', PLAYER_URL + '&h=ab12cd'),
    # Only a hash right after the video id is recognized.
    ('https://player.vimeo.com/video/12345?a=1&h=ab12cd', PLAYER_URL),
])
def test_get_vimeo_player_url(url, expected):
    assert get_vimeo_player_url(url, FakeSite()) == expected


def test_get_vimeo_player_url_site_with_slash():
    site = FakeSite(url='https://school.edu/')
    assert get_vimeo_player_url('https://player.vimeo.com/video/12345', site) == PLAYER_URL


@pytest.mark.parametrize("url", ['https://vimeo.com/12345', 'https://youtube.com/watch?v=1', None])
def test_get_vimeo_player_url_not_vimeo(url):
    assert get_vimeo_player_url(url, FakeSite()) is None
