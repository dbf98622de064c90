#!/usr/bin/env python3
"""Entry point for the basic temp stream sample"""

import asyncio
import sys

from dotenv import load_dotenv

from temp_file_stream.core import get_stream_config
from temp_file_stream.samples.basic_usage import write_temp_file

if __name__ == "__main__":
    load_dotenv()

    folder = sys.argv[1] if len(sys.argv) > 1 else get_stream_config()
    asyncio.run(write_temp_file(folder))
    print("\nDone.")
