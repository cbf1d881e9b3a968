import sys

from ngram_viterbi.cli import main

sys.exit(main())
