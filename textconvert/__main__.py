"""Main entry point for textconvert."""

from loguru import logger

from textconvert.cli import create_parser
from textconvert.core import load_config
from textconvert.processing import run_pipeline
from textconvert.utils import add_log_file_handler, setup_logger


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    try:
        config = load_config(args.config, args, parser)
    except ValueError as e:
        parser.error(str(e))

    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    if config.verbose:
        logger.info("=" * 60)
        logger.info("textconvert - Text Case Converter and Analyzer")
        logger.info("=" * 60)
        if config.conversion:
            logger.info(f"  Conversion: {config.conversion.value}")
        if config.analyze:
            logger.info(f"  Analysis format: {config.output_format}")
        if config.inputs:
            logger.info(f"  Inputs: {', '.join(config.inputs)}")
        logger.info("")

    try:
        run_pipeline(config)
        if config.verbose:
            logger.info("")
            logger.info("✓ Processing completed successfully")
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Processing interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Processing failed")
            logger.error("=" * 60)
        raise


if __name__ == "__main__":
    main()
