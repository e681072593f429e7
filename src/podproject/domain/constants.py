from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the fixed names, setting keys and baseline build settings shared
by the document model and the Pods project services.
"""

from typing import Any, Dict, List

# -----------------------------------------------------------------------------
# ROOT GROUPS
# -----------------------------------------------------------------------------
PODS_GROUP_NAME = "Pods"
DEVELOPMENT_PODS_GROUP_NAME = "Development Pods"
TARGETS_SUPPORT_FILES_GROUP_NAME = "Targets Support Files"
SUPPORT_FILES_GROUP_NAME = "Support Files"
PRODUCTS_GROUP_NAME = "Products"
FRAMEWORKS_GROUP_NAME = "Frameworks"

# Names of the specification subgroups by key
SPEC_SUBGROUPS: Dict[str, str] = {
    "resources": "Resources",
    "frameworks": "Frameworks",
}

# -----------------------------------------------------------------------------
# LOCALIZATION
# -----------------------------------------------------------------------------
LOCALIZATION_FOLDER_PATTERN = r"\.lproj$"
CURRENT_DIR_MARKER = "."

# -----------------------------------------------------------------------------
# BUILD SETTINGS
# -----------------------------------------------------------------------------
SYMROOT_KEY = "SYMROOT"
PREPROCESSOR_DEFINITIONS_KEY = "GCC_PREPROCESSOR_DEFINITIONS"

# Build root used when Xcode is configured to not use the workspace build root
LEGACY_BUILD_ROOT = "${SRCROOT}/../build"

BUILD_CONFIGURATION_KINDS = ("debug", "release")

PROJECT_DEFAULT_BUILD_SETTINGS: Dict[str, Dict[str, Any]] = {
    "all": {
        "ALWAYS_SEARCH_USER_PATHS": "NO",
        "CLANG_CXX_LANGUAGE_STANDARD": "gnu++14",
        "CLANG_CXX_LIBRARY": "libc++",
        "CLANG_ENABLE_MODULES": "YES",
        "CLANG_ENABLE_OBJC_ARC": "YES",
        "CLANG_WARN_BOOL_CONVERSION": "YES",
        "CLANG_WARN_EMPTY_BODY": "YES",
        "CLANG_WARN_ENUM_CONVERSION": "YES",
        "CLANG_WARN_INT_CONVERSION": "YES",
        "CLANG_WARN_UNREACHABLE_CODE": "YES",
        "GCC_C_LANGUAGE_STANDARD": "gnu11",
        "GCC_NO_COMMON_BLOCKS": "YES",
        "GCC_WARN_64_TO_32_BIT_CONVERSION": "YES",
        "GCC_WARN_ABOUT_RETURN_TYPE": "YES_ERROR",
        "GCC_WARN_UNDECLARED_SELECTOR": "YES",
        "GCC_WARN_UNUSED_FUNCTION": "YES",
        "GCC_WARN_UNUSED_VARIABLE": "YES",
    },
    "debug": {
        "COPY_PHASE_STRIP": "NO",
        "DEBUG_INFORMATION_FORMAT": "dwarf",
        "ENABLE_TESTABILITY": "YES",
        "GCC_DYNAMIC_NO_PIC": "NO",
        "GCC_OPTIMIZATION_LEVEL": "0",
        "GCC_PREPROCESSOR_DEFINITIONS": ["POD_CONFIGURATION_DEBUG=1", "DEBUG=1", "$(inherited)"],
        "MTL_ENABLE_DEBUG_INFO": "INCLUDE_SOURCE",
        "ONLY_ACTIVE_ARCH": "YES",
    },
    "release": {
        "COPY_PHASE_STRIP": "NO",
        "DEBUG_INFORMATION_FORMAT": "dwarf-with-dsym",
        "ENABLE_NS_ASSERTIONS": "NO",
        "GCC_PREPROCESSOR_DEFINITIONS": ["POD_CONFIGURATION_RELEASE=1", "$(inherited)"],
        "MTL_ENABLE_DEBUG_INFO": "NO",
        "VALIDATE_PRODUCT": "YES",
    },
}

# -----------------------------------------------------------------------------
# FILE TYPES
# -----------------------------------------------------------------------------
DEFAULT_FILE_TYPE = "text"

FILE_TYPES_BY_EXTENSION: Dict[str, str] = {
    "a": "archive.ar",
    "bundle": "wrapper.plug-in",
    "c": "sourcecode.c.c",
    "cpp": "sourcecode.cpp.cpp",
    "framework": "wrapper.framework",
    "h": "sourcecode.c.h",
    "hpp": "sourcecode.cpp.h",
    "json": "text.json",
    "m": "sourcecode.c.objc",
    "md": "net.daringfireball.markdown",
    "mm": "sourcecode.cpp.objcpp",
    "modulemap": "sourcecode.module",
    "plist": "text.plist.xml",
    "png": "image.png",
    "strings": "text.plist.strings",
    "stringsdict": "text.plist.stringsdict",
    "storyboard": "file.storyboard",
    "swift": "sourcecode.swift",
    "xcassets": "folder.assetcatalog",
    "xcconfig": "text.xcconfig",
    "xib": "file.xib",
}

# -----------------------------------------------------------------------------
# PODFILE
# -----------------------------------------------------------------------------
PODFILE_LANGUAGE_SPECIFICATION = "xcode.lang.ruby"
PODFILE_FILE_TYPE = "text"

# Directory entries never registered by the CLI walker
DEFAULT_EXCLUDE_PATTERNS: List[str] = [
    r"^\.",
    r"^(__pycache__|\.git|\.svn|xcuserdata)$",
]
