"""
Entry point for the SEO Page Writer.
Delegates to seo_writer.main.
"""
import sys

from seo_writer.main import main

if __name__ == "__main__":
    sys.exit(main())
