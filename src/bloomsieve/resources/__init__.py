"""Resource files and configuration templates."""


def get_default_config() -> str:
    """Return default configuration YAML content."""
    return """# bloomsieve configuration file

# Index whose directory holds the cached correction tables
index_file: ~

# Search parameters (can be overridden by CLI arguments)
search:
  pattern_size: 100
  window_size: 23
  kmer_size: 19
  # 01-pattern, e.g. "1101011"; overrides kmer_size when set
  shape: ~
  fpr: 0.05
  p_max: 0.15
  # A manual threshold disables the probabilistic correction
  threshold: ~
  cache_thresholds: true

# Runtime settings
runtime:
  log_level: "WARNING"
  log_file: ~
"""
