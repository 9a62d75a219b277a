# --- Log and Debug ---
# Short aliases for module names to keep CLI/env concise
LOG_ALIAS_MAP = {
    "ver": "gridver.rules.version",
    "version": "gridver.rules.version",
    "rule": "gridver.rules.rule",
    "rules": "gridver.rules",
    "lst": "gridver.listing",
    "listing": "gridver.listing",
    "conf": "gridver.config",
    "cli": "gridver.cli",
    "utils": "gridver.utils",
    "merge": "gridver.utils.merge",
}

LOG_LEVELS_ENV = "GRIDVER_LOG_LEVELS"

# --- Release sources ---
# Patterns pick candidate names out of a fetched release index
SELENIUM_RELEASE_URL = "https://selenium-release.storage.googleapis.com/"

DEFAULT_SOURCES = {
    "selenium": {
        "pattern": r"selenium-server-standalone-\d+(?:\.\d+)*\.jar",
        "description": f"Selenium server JAR listed at {SELENIUM_RELEASE_URL}",
    },
    "iedriver-win32": {
        "pattern": r"IEDriverServer_Win32_\d+(?:\.\d+)*\.zip",
        "description": f"32-bit IEDriverServer listed at {SELENIUM_RELEASE_URL}",
    },
    "iedriver-x64": {
        "pattern": r"IEDriverServer_x64_\d+(?:\.\d+)*\.zip",
        "description": f"64-bit IEDriverServer listed at {SELENIUM_RELEASE_URL}",
    },
    "chromedriver": {
        "pattern": r"\d+(?:\.\d+)+/chromedriver_\w+\.zip",
        "description": "chromedriver archives listed in the chromedriver bucket",
    },
    "geckodriver": {
        "pattern": r'"tag_name"\s*:\s*"v?\d+(?:\.\d+)+"',
        "description": "geckodriver GitHub release tags",
    },
    "operadriver": {
        "pattern": r'"tag_name"\s*:\s*"v?\.?\d+(?:\.\d+)+"',
        "description": "OperaChromiumDriver GitHub release tags",
    },
}
