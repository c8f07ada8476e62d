import sys

from uconline.cmd import main, options


sys.exit(main.main(options.parse()))
