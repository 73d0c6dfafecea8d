import logging


def configure_logging(level: str = "INFO", service_name: str = "review-service") -> None:
    logging.basicConfig(
        level=level.upper(),
        format=f"%(asctime)s %(levelname)s {service_name} %(name)s %(message)s",
    )
    # IMPORTANT: never log review content; log only IDs/ratings/outcome kinds.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
