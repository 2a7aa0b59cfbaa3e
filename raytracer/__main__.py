import sys

from raytracer.app import main

sys.exit(main())
