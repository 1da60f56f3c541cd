import pytest

from hexo_blog import session
from hexo_blog.config import set_blog_configuration
from hexo_blog.core.frontmatter_locator import clear_span_cache
from hexo_blog.core.frontmatter_reader import clear_metadata_cache


@pytest.fixture(autouse=True)
def _reset_process_state():
    """Caches, pinned blogs and the configuration singleton are process-wide."""
    clear_span_cache()
    clear_metadata_cache()
    session._PINNED_BLOGS.clear()
    set_blog_configuration(None)
    yield
    session._PINNED_BLOGS.clear()
    set_blog_configuration(None)
