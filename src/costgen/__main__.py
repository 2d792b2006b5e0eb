import sys

from costgen.transcoder import main

sys.exit(main())
