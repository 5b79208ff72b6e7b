import logging
import sys
import os
from types import FrameType
from loguru import logger
from opentelemetry.sdk._logs import LoggerProvider, LoggingHandler
from opentelemetry.sdk._logs.export import BatchLogRecordProcessor
from opentelemetry.exporter.otlp.proto.grpc._log_exporter import OTLPLogExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry._logs import set_logger_provider

from app.core.config import get_settings

# Library loggers routed through Loguru instead of their own console handlers
HIJACKED_LOGGERS = (
    "uvicorn",
    "uvicorn.error",
    "uvicorn.access",
    "fastapi",
    "httpx",
    "httpcore",
)


class InterceptHandler(logging.Handler):
    """
    Redirects standard logging to Loguru.
    Ignores OpenTelemetry's own records so the OTel sink cannot feed itself.
    """

    def emit(self, record: logging.LogRecord) -> None:
        if record.name.startswith("opentelemetry"):
            return

        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame: FrameType | None = logging.currentframe()
        depth = 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(level: str | None = None):
    """
    Route all application and library logging through Loguru.

    Installs the InterceptHandler on the root logger and on HIJACKED_LOGGERS,
    replaces Loguru's default sink with a coloured stderr sink, and adds an
    OpenTelemetry sink when OTEL_EXPORTER_OTLP_ENDPOINT is set.

    Parameters:
        level (str | None): Minimum level; defaults to the LOG_LEVEL setting.

    Returns:
        The configured Loguru logger.
    """
    level = (level or get_settings().LOG_LEVEL).upper()

    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(level)

    for name in HIJACKED_LOGGERS:
        log = logging.getLogger(name)
        log.handlers = []
        log.propagate = False
        log.addHandler(InterceptHandler())

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> <level>{level}</level>: <cyan>[{name}:{line}]</cyan> - <level>{message}</level>",
        colorize=True,
        enqueue=True,
    )

    endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    if endpoint:
        try:
            resource = Resource.create(
                {
                    "service.name": os.getenv("OTEL_SERVICE_NAME", "password-recovery"),
                    "deployment.environment": os.getenv("ENVIRONMENT", "development"),
                }
            )

            logger_provider = LoggerProvider(resource=resource)
            set_logger_provider(logger_provider)

            insecure = (
                os.getenv("OTEL_EXPORTER_OTLP_INSECURE", "false").lower() == "true"
            )
            exporter = OTLPLogExporter(endpoint=endpoint, insecure=insecure)
            logger_provider.add_log_record_processor(BatchLogRecordProcessor(exporter))

            otel_handler = LoggingHandler(
                level=logging.INFO, logger_provider=logger_provider
            )
            logger.add(otel_handler, level=level, serialize=True)

            logger.info("Logging (Loguru Sink) Active.")

        except Exception as e:
            # Print to stderr directly if OTel fails, don't crash the app
            print(f"Log Setup Failed: {e}", file=sys.stderr)

    return logger
