from __future__ import annotations

import argparse
import signal
import sys
import threading
from typing import List, Optional

import yaml

from argus.core.config import ArgusConfig, default_config, load_config
from argus.core.errors import ArgusError
from argus.motion.detector import MotionDetectionPipeline
from argus.service.runner import Runner
from argus.utils.logger import setup_logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="argus", description="Webcam motion detector")
    ap.add_argument("--config", default="", help="YAML configuration file")
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    log = setup_logger(args.log_level)

    cfg: ArgusConfig
    if args.config:
        try:
            cfg = load_config(args.config)
        except (OSError, ValueError, yaml.YAMLError) as e:
            log.error(f"Cannot load configuration from {args.config}: {e}")
            return 1
    else:
        cfg = default_config()
    log.info("Starting...")

    runner = Runner(cfg, MotionDetectionPipeline())
    try:
        runner.init()
    except ArgusError as e:
        log.error(f"Initialization error: {e}")
        return 1

    stop = threading.Event()

    def _on_signal(signum, frame):
        log.info(f"Aborting: got {signal.Signals(signum).name}")
        stop.set()

    signal.signal(signal.SIGINT, _on_signal)
    signal.signal(signal.SIGTERM, _on_signal)

    try:
        runner.run(stop)
    finally:
        runner.close()
        log.info("Bye")
    return 0


if __name__ == "__main__":
    sys.exit(main())
