# src/ldoc_gen/observability/names.py

"""Standard metric names for ldoc-gen observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Conversion Metrics
# ============================================================================

# Duration (one sample per converted file)
CONVERSION_FILE_DURATION = "conversion_file_duration"

# Counters
CONVERSION_FILES_TOTAL = "conversion_files_total"
CONVERSION_FILES_FAILED_TOTAL = "conversion_files_failed_total"

# Counters (accumulate over a batch)
CONVERSION_CHUNKS_CREATED = "conversion_chunks_created"
CONVERSION_ALIASES_EXTRACTED = "conversion_aliases_extracted"

# Gauges
CONVERSION_CHUNKS_PER_FILE = "conversion_chunks_per_file"
