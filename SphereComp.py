# SphereComp.py
import argparse
import logging
import sys

from PyQt5.QtWidgets import QApplication

from logging_config import setup_logging
from app.main_app import MainWindow
from net.host_link import HostLink

def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Sphere compressor control panel")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ap.add_argument("--log-file", default=None, help="also write logs to this file")
    ap.add_argument("--dry-run", action="store_true",
                    help="log sphere:// URLs instead of opening them")
    return ap.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    app = QApplication(sys.argv[:1])
    w = MainWindow(HostLink(dry_run=args.dry_run)); w.show()
    return app.exec_()

if __name__ == "__main__":
    sys.exit(main())
