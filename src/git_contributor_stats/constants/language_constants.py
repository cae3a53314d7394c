"""
Constants for mapping file extensions to language labels.
"""

from types import MappingProxyType

# Label returned for an empty extension. Files without an extension are
# dropped before classification, so this never reaches a language report.
UNKNOWN_LANGUAGE = "Unknown"

# ============================================================================
# EXTENSION -> LANGUAGE (CASE-SENSITIVE, keys are written without the dot)

EXTENSION_TO_LANGUAGE = MappingProxyType(
    {
        # JVM
        "kt": "Kotlin",
        "kts": "Kotlin Script",
        "java": "Java",
        "groovy": "Groovy",
        "scala": "Scala",
        "sc": "Scala",
        "clj": "Clojure",
        "cljs": "ClojureScript",
        "cljc": "Clojure/ClojureScript",
        # Scripting
        "py": "Python",
        "rb": "Ruby",
        "pl": "Perl",
        "pm": "Perl",
        "php": "PHP",
        "lua": "Lua",
        "r": "R",
        "jl": "Julia",
        "sh": "Shell",
        "bash": "Shell",
        "zsh": "Shell",
        "ps1": "PowerShell",
        "vbs": "VBScript",
        # Web
        "js": "JavaScript",
        "jsx": "JavaScript",
        "mjs": "JavaScript",
        "cjs": "JavaScript",
        "ts": "TypeScript",
        "tsx": "TypeScript",
        "coffee": "CoffeeScript",
        "elm": "Elm",
        "vue": "Vue",
        "svelte": "Svelte",
        "html": "HTML",
        "htm": "HTML",
        "css": "CSS",
        "scss": "Sass",
        "sass": "Sass",
        "less": "Less",
        # Systems
        "c": "C",
        "h": "C",
        "cpp": "C++",
        "cc": "C++",
        "cxx": "C++",
        "hpp": "C++",
        "cs": "C#",
        "go": "Go",
        "rs": "Rust",
        "swift": "Swift",
        "m": "Objective-C",
        "nim": "Nim",
        "zig": "Zig",
        "vb": "Visual Basic",
        "dart": "Dart",
        "gd": "Godot (GDScript)",
        # Functional
        "hs": "Haskell",
        "lhs": "Haskell",
        "ml": "OCaml",
        "mli": "OCaml",
        "ex": "Elixir",
        "exs": "Elixir",
        "erl": "Erlang",
        "hrl": "Erlang",
        "fs": "F#",
        # Scientific
        "f": "Fortran",
        "f90": "Fortran",
        "f95": "Fortran",
        # Data and markup
        "sql": "SQL",
        "md": "Markdown",
        "yml": "YAML",
        "yaml": "YAML",
        "json": "JSON",
        "xml": "XML",
        "toml": "TOML",
        "proto": "Protocol Buffers",
    }
)
