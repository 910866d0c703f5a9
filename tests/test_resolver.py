import os
import sys
import pytest

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, ROOT_DIR)

from moodle_url import (
    get_url_anchor,
    guess_moodle_domain,
    remove_protocol,
    remove_url_anchor,
    same_domain_and_path,
    to_absolute_url,
    to_relative_url,
)

STATIC_URL = 'https://jubileelife.edwantage.net/'


@pytest.mark.parametrize("url,expected", [
    ('https://site.example/course/view.php?id=5', 'site.example'),
    ('site.example/moodle/my/', 'site.example/moodle'),
    ('http://school.edu/login/index.php', 'school.edu'),
    ('https://school.edu/?redirect=0', 'school.edu'),
    ('https://school.edu/moodle/mod/page/view.php?id=3', 'school.edu/moodle'),
    ('https://example.com/some/page', 'example.com'),
    ('example.com', 'example.com'),
    (STATIC_URL, 'jubileelife.edwantage.net'),
    ('', None),
    (None, None),
])
def test_guess_moodle_domain(url, expected):
    assert guess_moodle_domain(url) == expected


@pytest.mark.parametrize("url,expected", [
    ('HTTPS://Example.com/a', 'Example.com/a'),
    ('ftp://files.example.com', 'files.example.com'),
    ('example.com/https://x', 'example.com/https://x'),
    (5, ''),
])
def test_remove_protocol(url, expected):
    assert remove_protocol(url) == expected


@pytest.mark.parametrize("url_a,url_b,expected", [
    ('https://Site.com/a/', 'http://site.com/a', True),
    ('site.com/a', 'https://site.com/a/', True),
    ('https://site.com:8080/a?x=1#y', 'https://user@site.com/a', True),
    ('https://site.com', 'https://site.com/', True),
    ('https://site.com/a', 'https://site.com/b', False),
    ('https://site.com/a', 'https://other.com/a', False),
    (STATIC_URL, STATIC_URL, True),
    (STATIC_URL, 'https://jubileelife.edwantage.net', False),
    (None, 'https://site.com', False),
])
def test_same_domain_and_path(url_a, url_b, expected):
    assert same_domain_and_path(url_a, url_b) is expected


def test_url_anchor():
    url = 'https://x.com/p#a=1#b=2'
    assert get_url_anchor(url) == '#a=1#b=2'
    assert remove_url_anchor(url) == 'https://x.com/p'


def test_url_without_anchor():
    assert get_url_anchor('https://x.com/p') is None
    assert remove_url_anchor('https://x.com/p') == 'https://x.com/p'
    assert get_url_anchor(None) is None
    assert remove_url_anchor(None) == ''


@pytest.mark.parametrize("parent,url,expected", [
    ('https://site.com/course/view.php', 'mod/page.php', 'https://site.com/course/mod/page.php'),
    ('https://site.com/course/', 'mod/page.php', 'https://site.com/course/mod/page.php'),
    ('https://site.com/x', '//other.com/y', 'https://other.com/y'),
    ('http://site.com:8080/x', '//cdn.com/a', 'http://cdn.com/a'),
    ('https://site.com/course/view.php', '/pluginfile.php/1', 'https://site.com/pluginfile.php/1'),
    ('https://site.com', 'file.php', 'https://site.com/file.php'),
    ('https://user:pw@site.com:8080/a/b', 'c', 'https://user:pw@site.com:8080/a/c'),
    ('https://site.com/x', 'http://other.com', 'http://other.com'),
    ('https://site.com/x', STATIC_URL, STATIC_URL),
    (None, 'a.php', ''),
    ('https://site.com', None, ''),
])
def test_to_absolute_url(parent, url, expected):
    assert to_absolute_url(parent, url) == expected


@pytest.mark.parametrize("parent,url,expected", [
    ('https://site.com', 'https://site.com/course/view.php', 'course/view.php'),
    ('https://site.com/moodle', 'http://site.com/moodle/mod/page.php', 'mod/page.php'),
    ('https://site.com', 'course/view.php', 'course/view.php'),
    ('https://site.com', 'https://other.com/a', 'https://other.com/a'),
    ('https://site.com', STATIC_URL, '/'),
    (None, 'https://site.com/a', ''),
])
def test_to_relative_url(parent, url, expected):
    assert to_relative_url(parent, url) == expected


def test_to_relative_url_replaces_parent_anywhere():
    # Plain text replacement, the parent is also removed from the query.
    url = 'https://other.com/?next=site.com/x'
    assert to_relative_url('https://site.com', url) == 'other.com/?next=/x'
