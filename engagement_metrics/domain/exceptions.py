"""Errors raised by the metrics publisher."""


class PublisherInitError(Exception):
    """The publisher could not be constructed (missing credentials or namespace)."""


class PublishError(Exception):
    """A metric datum was not accepted by the monitoring backend.

    Network failures, auth failures, throttling and validation rejections all
    surface as this one error. The backend exception is kept as ``__cause__``.
    """

    def __init__(self, metric_name: str, detail: str):
        super().__init__(f"Failed to publish {metric_name}: {detail}")
        self.metric_name = metric_name
        self.detail = detail
