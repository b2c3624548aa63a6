# GitHub REST API configuration
GITHUB_API_BASE = "https://api.github.com"
GITHUB_API_TIMEOUT = 30.0  # seconds
GITHUB_COMMITS_PER_PAGE = 100  # One page is the analyzed commit history
GITHUB_RELEASES_PER_PAGE = 10
GITHUB_MAX_RETRIES = 3  # Retries on 429 / 5xx before giving up

# Documentation keyword categories (matched case-insensitively in README text)
README_INSTALL_KEYWORDS = ("install", "setup")
README_USAGE_KEYWORDS = ("usage", "example")
README_LICENSE_KEYWORDS = ("license",)
README_CONTRIBUTING_KEYWORDS = ("contribut",)

# Canonical root entries for structure scoring (lowercase)
SOURCE_DIRECTORIES = frozenset({"src", "lib", "app", "pkg", "cmd"})
TEST_DIRECTORIES = frozenset({"test", "tests", "spec", "__tests__"})
DOCS_DIRECTORIES = frozenset({"docs", "doc", "documentation"})
IGNORE_FILES = frozenset({".gitignore"})
MANIFEST_FILES = frozenset(
    {
        # JavaScript / TypeScript
        "package.json",
        # Python
        "setup.py",
        "setup.cfg",
        "pyproject.toml",
        "requirements.txt",
        # Go
        "go.mod",
        # Rust
        "cargo.toml",
        # JVM
        "pom.xml",
        "build.gradle",
        "build.gradle.kts",
        # Ruby / PHP
        "gemfile",
        "composer.json",
        # C / C++
        "cmakelists.txt",
        "makefile",
    }
)

# Testing indicators (substring match against lowercase root names)
TEST_INDICATORS = (
    "test",
    "spec",
    "coverage",
    "jest",
    "mocha",
    "pytest",
    "unittest",
    "gotest",
    "vitest",
    "tox.ini",
    "karma",
    "cypress",
)

# CI configuration entries (exact lowercase root names)
CI_INDICATORS = frozenset(
    {
        ".github",
        ".gitlab-ci.yml",
        ".travis.yml",
        ".circleci",
        "jenkinsfile",
        "azure-pipelines.yml",
    }
)

# Commit message placeholders that never count as meaningful
PLACEHOLDER_COMMIT_PREFIXES = ("wip", "temp")

# Well-known languages (lowercase, exact match against GitHub linguist names)
WELL_KNOWN_LANGUAGES = frozenset(
    {
        "python",
        "javascript",
        "typescript",
        "java",
        "go",
        "rust",
        "c++",
        "c#",
        "kotlin",
        "swift",
        "ruby",
    }
)
