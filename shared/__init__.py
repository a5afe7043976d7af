"""Shared utilities for the Bookmark Preview Cloud Functions."""

from .config_utils import (
    FunctionConfig,
    load_config,
    configure_logging,
)

from .fetch_utils import (
    USER_AGENT,
    fetch_webpage,
)

from .url_utils import (
    is_valid_url,
    get_origin,
    extract_domain,
    get_favicon_url,
)

from .image_utils import (
    IMAGE_MARKERS,
    looks_like_image,
    normalize_image_url,
)

from .meta_utils import (
    first_non_empty,
    get_meta_content,
    unique_tags,
    resolve_metadata,
)

from .platform_utils import (
    PlatformHandler,
    PLATFORM_HANDLERS,
    find_platform_handler,
    run_platform_extractor,
)

from .preview_utils import (
    ExtractionResult,
    parse_html,
    extract_preview,
)

from .content_utils import (
    MAX_CONTENT_LENGTH,
    PREVIEW_LENGTH,
    extract_page_content,
    content_preview,
)

from .completion_utils import (
    SYSTEM_INSTRUCTION,
    GENERATION_CONFIG,
    FALLBACK_ANSWER,
    build_user_prompt,
    generate_answer,
)

__all__ = [
    # Configuration
    'FunctionConfig',
    'load_config',
    'configure_logging',
    # Fetching
    'USER_AGENT',
    'fetch_webpage',
    # URL utilities
    'is_valid_url',
    'get_origin',
    'extract_domain',
    'get_favicon_url',
    # Image utilities
    'IMAGE_MARKERS',
    'looks_like_image',
    'normalize_image_url',
    # Metadata resolution
    'first_non_empty',
    'get_meta_content',
    'unique_tags',
    'resolve_metadata',
    'PlatformHandler',
    'PLATFORM_HANDLERS',
    'find_platform_handler',
    'run_platform_extractor',
    'ExtractionResult',
    'parse_html',
    'extract_preview',
    # Question answering
    'MAX_CONTENT_LENGTH',
    'PREVIEW_LENGTH',
    'extract_page_content',
    'content_preview',
    'SYSTEM_INSTRUCTION',
    'GENERATION_CONFIG',
    'FALLBACK_ANSWER',
    'build_user_prompt',
    'generate_answer',
]
