"""
Run the demo queries over the sample city/country tables:

    python -m sqlike
"""

import sys

from sqlike.demo import main

if __name__ == '__main__':
	sys.exit(main())
