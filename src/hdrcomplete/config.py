DEFAULT_MODE: str = "c++"

# Directories searched for "quoted" includes before the system paths
DEFAULT_USER_PATHS: list[str] = ["."]

# Environment overrides (os.pathsep-separated directory lists)
USER_PATH_ENV: str = "HDRCOMPLETE_USER_PATH"
SYSTEM_PATH_ENV: str = "HDRCOMPLETE_SYSTEM_PATH"
VERBOSE_ENV: str = "HDRCOMPLETE_VERBOSE"

# /* ~~~ mode -> filename regex; directories are always offered ~~~ */
DEFAULT_MODE_FILTERS: dict[str, str] = {
    "c": r"\.h$",
    "c++": r"(^[A-Za-z0-9_]+|\.(h|hpp|hxx|hh))$",   # extensionless std headers too
    "objc": r"\.h$",
}

# Fixed include roots per platform family
STATIC_SYSTEM_PATHS: dict[str, list[str]] = {
    "linux": ["/usr/include/", "/usr/local/include/"],
    "bsd": ["/usr/include/", "/usr/local/include/"],
    "unix": ["/usr/include/", "/usr/local/include/"],
    "darwin": [
        "/usr/local/include/",
        "/Library/Developer/CommandLineTools/SDKs/MacOSX.sdk/usr/include/",
    ],
    "windows": [],
}

# /* ~~~ (root, suffixes): descend into the greatest version dir, then join suffix ~~~ */
_MSVC = "C:/Program Files/Microsoft Visual Studio/2022/Community/VC/Tools/MSVC"
_WINKITS = "C:/Program Files (x86)/Windows Kits/10/Include"

VERSIONED_SYSTEM_ROOTS: dict[str, list[tuple[str, list[str]]]] = {
    "linux": [
        ("/usr/include/c++", [""]),
    ],
    "darwin": [
        ("/Library/Developer/CommandLineTools/usr/lib/clang", ["include"]),
    ],
    "windows": [
        (_MSVC, ["include"]),
        (_WINKITS, ["ucrt"]),
        (_WINKITS, ["um"]),
        (_WINKITS, ["shared"]),
    ],
}
