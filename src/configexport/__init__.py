"""
configexport - Dependency-closure export of configuration objects

Exports a chosen set of configuration objects, together with every
configuration object they depend on, into a target directory. Volatile
bookkeeping keys (instance identifiers, content hashes) can be stripped on
the way out so the exported files are diff-stable between environments.

Key Features:
- Dependency-first (postorder) export with at-most-once writes
- Cycle-safe traversal with per-export state
- Optional redaction of instance identifiers and integrity hashes
- YAML file storage compatible with configuration sync directories
- Layered configuration (defaults, JSON file, environment variables)

Package Structure:
- core/: Export algorithm, redaction policy, models and errors
- io/: Source repositories and destination writers
- cli/: Command-line interface
"""

__version__ = "0.3.0"
