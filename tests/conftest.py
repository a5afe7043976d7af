"""
Shared pytest fixtures for Bookmark Preview function tests.
"""

import pytest
import sys
import importlib.util
from pathlib import Path
from bs4 import BeautifulSoup

from shared.config_utils import FunctionConfig

# Project root for finding Cloud Function modules
PROJECT_ROOT = Path(__file__).parent.parent


def _load_module_from_path(module_name: str, file_path: Path):
    """Load a module from a specific file path."""
    spec = importlib.util.spec_from_file_location(module_name, file_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


# Load Cloud Function modules with unique names at module load time
_bookmark_preview_module = _load_module_from_path(
    'bookmark_preview_main',
    PROJECT_ROOT / 'bookmark-preview' / 'main.py'
)

_url_analyzer_module = _load_module_from_path(
    'url_analyzer_main',
    PROJECT_ROOT / 'url-analyzer' / 'main.py'
)


# ============================================================================
# Bookmark Preview Function Fixtures
# ============================================================================

@pytest.fixture
def handle_preview():
    """Returns handle_preview from bookmark-preview."""
    return _bookmark_preview_module.handle_preview


@pytest.fixture
def preview_bookmark():
    """Returns main entry point from bookmark-preview."""
    return _bookmark_preview_module.preview_bookmark


# ============================================================================
# URL Analyzer Function Fixtures
# ============================================================================

@pytest.fixture
def url_analyzer_class():
    """Returns the UrlAnalyzer class from url-analyzer."""
    return _url_analyzer_module.UrlAnalyzer


@pytest.fixture
def analysis_error_class():
    """Returns the AnalysisError class from url-analyzer."""
    return _url_analyzer_module.AnalysisError


# ============================================================================
# Configuration
# ============================================================================

@pytest.fixture
def test_config():
    """Configuration with a completion key, non-production."""
    return FunctionConfig(gemini_api_key='test-api-key', app_env='test')


@pytest.fixture
def production_config():
    """Production configuration with a completion key."""
    return FunctionConfig(gemini_api_key='test-api-key', app_env='production')


@pytest.fixture
def config_without_key():
    """Configuration missing the completion key."""
    return FunctionConfig(gemini_api_key=None, app_env='test')


# ============================================================================
# Sample Documents
# ============================================================================

SAMPLE_ARTICLE_HTML = """
<!DOCTYPE html>
<html>
<head>
    <title>10 Python Tips | Example Blog</title>
    <meta property="og:title" content="  10 Python Tips You Should Know  ">
    <meta property="og:description" content="Learn essential Python tips">
    <meta name="description" content="Plain description">
    <meta property="og:image" content="/images/cover.png">
    <meta property="og:site_name" content="Example Blog">
    <meta property="og:url" content="https://example.com/posts/python-tips">
    <link rel="canonical" href="https://example.com/canonical">
</head>
<body>
    <header>Site header</header>
    <nav>Home | About</nav>
    <article>
        <h1>10 Python Tips You Should Know</h1>
        <p>Here are some tips for Python development.</p>
    </article>
    <footer>Copyright</footer>
</body>
</html>
"""

SAMPLE_ZENN_HTML = """
<!DOCTYPE html>
<html>
<head>
    <title>Pythonで始める型ヒント | Zenn</title>
    <meta property="og:title" content="Pythonで始める型ヒント">
    <meta property="og:description" content="型ヒントの基本を解説します">
    <meta property="og:image" content="https://res.cloudinary.com/zenn/image/upload/og.png">
    <meta property="og:site_name" content="Zenn">
    <meta property="article:published_time" content="2024-12-15T10:00:00+09:00">
</head>
<body>
    <article>
        <h1>Pythonで始める型ヒント</h1>
        <a class="ArticleHeader_userName__abc" href="/taro">Taro Yamada</a>
        <div class="topics">
            <a href="/topics/python"> Python </a>
            <a href="/topics/typing">typing</a>
            <a href="/topics/python">Python</a>
        </div>
        <p>本文です。</p>
    </article>
</body>
</html>
"""

SAMPLE_QIITA_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta property="og:title" content="requestsの使い方 - Qiita">
    <meta property="og:description" content="requestsライブラリのまとめ">
    <meta property="og:image" content="https://qiita-user-contents.imgix.net/image.png">
    <meta name="twitter:creator" content="@hanako_tw">
</head>
<body>
    <time datetime="2023-04-01T09:00:00Z">2023年04月01日</time>
    <a href="/tags/python">Python</a>
    <a href="/tags/requests">requests</a>
</body>
</html>
"""

SAMPLE_GITHUB_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta property="og:title" content="GitHub - psf/requests: A simple, yet elegant, HTTP library.">
    <meta property="og:description" content="A simple, yet elegant, HTTP library.">
    <meta property="og:image" content="https://opengraph.githubassets.com/abc/psf/requests">
</head>
<body>
    <img class="avatar avatar-user" src="https://avatars.githubusercontent.com/u/1?s=48">
    <a class="topic-tag" href="/topics/python">python</a>
    <a class="topic-tag" href="/topics/http">http</a>
</body>
</html>
"""


@pytest.fixture
def sample_article_html():
    """Raw HTML of a generic article page."""
    return SAMPLE_ARTICLE_HTML


@pytest.fixture
def sample_article_soup():
    """Returns BeautifulSoup of a generic article page."""
    return BeautifulSoup(SAMPLE_ARTICLE_HTML, 'html.parser')


@pytest.fixture
def sample_zenn_html():
    return SAMPLE_ZENN_HTML


@pytest.fixture
def sample_zenn_soup():
    return BeautifulSoup(SAMPLE_ZENN_HTML, 'html.parser')


@pytest.fixture
def sample_qiita_soup():
    return BeautifulSoup(SAMPLE_QIITA_HTML, 'html.parser')


@pytest.fixture
def sample_github_soup():
    return BeautifulSoup(SAMPLE_GITHUB_HTML, 'html.parser')


@pytest.fixture
def empty_soup():
    """Returns empty BeautifulSoup."""
    return BeautifulSoup("", 'html.parser')


# ============================================================================
# HTTP request mocks
# ============================================================================

@pytest.fixture
def mock_flask_request():
    """Factory for creating mock Flask request objects."""
    class MockRequest:
        def __init__(self, json_data=None, method='POST', args=None):
            self._json = json_data
            self.method = method
            self.args = args or {}
            self.data = b''

        def get_json(self, force=False, silent=False):
            return self._json

    return MockRequest
