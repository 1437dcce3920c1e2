import sys

from khmer_transliterator.cli import main

sys.exit(main())
