#!/usr/bin/env python3
"""Entry point for the text writer/reader sample"""

import sys

from dotenv import load_dotenv

from temp_file_stream.core import get_stream_config, setup_logging
from temp_file_stream.samples.writers_and_readers import write_and_read

if __name__ == "__main__":
    load_dotenv()

    if len(sys.argv) > 1 and sys.argv[1] in ["--help", "-h"]:
        print("Temp stream writer/reader sample")
        print("Usage:")
        print("  python scripts/writers_and_readers.py           # Use TEMP_FILE_STREAM_ROOT or OS temp")
        print("  python scripts/writers_and_readers.py <path>    # Use an explicit folder")
        print("\nEnvironment variables:")
        print("  TEMP_FILE_STREAM_ROOT - Root temp folder (optional)")
        sys.exit(0)

    folder = sys.argv[1] if len(sys.argv) > 1 else get_stream_config()
    result = write_and_read(folder, logger=setup_logging(), wait=True)
    if result.exists_after:
        print(f"Error: {result.path} was not removed")
        sys.exit(1)
    print("\n✅ Processing complete.")
