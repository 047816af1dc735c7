import sys

from doc_scanner.application.DocScannerApplication import DocScannerApplication


# ----------------------------------------------------------------------------------------------------------------------
def main() -> int:
    """
    Runs the DocScanner application.
    """
    application = DocScannerApplication()

    return application.run()


# ----------------------------------------------------------------------------------------------------------------------
if __name__ == '__main__':
    sys.exit(main())
