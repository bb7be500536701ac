"""
Constants for config.xml documents.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

# Required tag of the document root
ROOT_TAG = "widget"

# Indentation (spaces per level) used when writing documents
DEFAULT_INDENT = 4

DEFAULT_ENCODING = "utf-8"

# Root attribute names written by the validated setters
ATTR_ID = "id"
ATTR_VERSION = "version"
ATTR_ANDROID_VERSION_CODE = "android-versionCode"
ATTR_IOS_BUNDLE_VERSION = "ios-CFBundleVersion"

TAG_PREFERENCE = "preference"
TAG_PLATFORM = "platform"
TAG_ACCESS = "access"
TAG_HOOK = "hook"

# Cordova lifecycle events accepted by add_hook
HOOK_TYPES = frozenset(
    {
        "after_build",
        "after_compile",
        "after_clean",
        "after_docs",
        "after_emulate",
        "after_platform_add",
        "after_platform_rm",
        "after_platform_ls",
        "after_plugin_add",
        "after_plugin_ls",
        "after_plugin_rm",
        "after_plugin_search",
        "after_plugin_install",
        "after_prepare",
        "after_run",
        "after_serve",
        "before_build",
        "before_clean",
        "before_compile",
        "before_docs",
        "before_emulate",
        "before_platform_add",
        "before_platform_rm",
        "before_platform_ls",
        "before_plugin_add",
        "before_plugin_ls",
        "before_plugin_rm",
        "before_plugin_search",
        "before_plugin_install",
        "before_plugin_uninstall",
        "before_prepare",
        "before_run",
        "before_serve",
        "pre_package",
    }
)
