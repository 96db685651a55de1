import sys

from pdf_coordinates.main import main

if __name__ == "__main__":
    sys.exit(main())
