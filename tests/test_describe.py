import os
import sys

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT_DIR)

from moodle_url.describe import describe_url


def test_describe_url():
    report = describe_url('https://www.school.ac.uk/course/view.php?id=2#top')
    assert report['valid'] is True
    assert report['parts']['domain'] == 'www.school.ac.uk'
    assert report['parts']['query'] == 'id=2'
    assert report['anchor'] == '#top'
    assert report['guessed_domain'] == 'www.school.ac.uk'
    assert report['is_vimeo'] is False
    assert report['subdomain'] == 'www'
    assert report['registered_domain'] == 'school.ac.uk'
    assert report['suffix'] == 'ac.uk'


def test_describe_vimeo_url():
    report = describe_url('https://player.vimeo.com/video/12345')
    assert report['is_vimeo'] is True
    assert report['registered_domain'] == 'vimeo.com'


def test_describe_url_without_domain():
    report = describe_url('course/view.php')
    assert report['parts']['path'] == 'course/view.php'
    assert report['registered_domain'] is None


def test_describe_non_string():
    report = describe_url(None)
    assert report['valid'] is False
    assert report['parts'] is None
