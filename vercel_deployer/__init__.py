"""Deploy static HTML pages to Vercel from workflow pipelines."""

__version__ = "0.1.0"
