"""ACF Annual Report PDF-to-CSV Conversion Pipeline.

This package converts annual statistical report PDFs (one state per text line,
four numeric columns per year) into normalized CSV files keyed by state id and year.

Main components:
- config: YAML settings loading
- cleaners: State directory and data-row recognition
- processors: PDF text extraction and report file routing
- transformers: Yearly and multi-year row flattening
- orchestration: Discovery, template copying and run management
- utils: Output CSV management and logging helpers
"""

__version__ = "1.0.0"
__author__ = "ACF Data Team"

# Package metadata
__all__ = [
    "__version__",
    "__author__",
]
