# scripts/run_estimator.py
import argparse
from salary_estimator.log import setup_logging
from salary_estimator.main import run


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default="config/config.yaml")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING (default: $LOG_LEVEL or INFO)")
    args = parser.parse_args()
    setup_logging(args.log_level)
    run(args.config)


if __name__ == "__main__":
    main()
