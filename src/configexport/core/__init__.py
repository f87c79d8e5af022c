"""
Core export components for configexport.

- exporter: Dependency-closure walk writing each object once, dependencies first
- redaction: Removal of volatile keys before write
- models: Configuration object model and dependency extraction
- errors: Exception hierarchy
- utils: Configuration, logging and file writing utilities
"""
