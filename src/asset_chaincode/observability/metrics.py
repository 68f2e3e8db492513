"""Prometheus metrics for chaincode invocations.

`PrometheusMetricsRegistry` wraps a private `prometheus_client` registry so
several hosts (and tests) can live in one process without clashing on the
global default registry. `ChaincodeMetrics` defines the invocation metrics
recorded by the host.
"""

from typing import Any

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest


class PrometheusMetricsRegistry:
    """Wrapper for a Prometheus collector registry with get-or-create helpers.

    Attributes:
        registry (CollectorRegistry): The underlying Prometheus collector registry.
        namespace (str | None): An optional namespace prefix for all metrics created by this registry.
    """

    def __init__(self, namespace: str | None = None) -> None:
        self.registry = CollectorRegistry()
        self.namespace = namespace
        self._metrics: dict[str, Counter | Histogram] = {}

    def counter(
        self,
        name: str,
        description: str,
        labels: list[str] | None = None,
        **kwargs: Any,
    ) -> Counter:
        """Creates or retrieves a Prometheus Counter metric.

        Args:
            name: The base name of the metric.
            description: A brief explanation of the metric.
            labels: An optional list of label names.
            **kwargs: Additional keyword arguments passed to `prometheus_client.Counter`.
        """
        if name not in self._metrics:
            self._metrics[name] = Counter(
                name=name,
                documentation=description,
                labelnames=labels or [],
                namespace=self.namespace or "",
                registry=self.registry,
                **kwargs,
            )
        return self._metrics[name]  # type: ignore

    def histogram(
        self,
        name: str,
        description: str,
        labels: list[str] | None = None,
        buckets: tuple[float, ...] | None = None,
        **kwargs: Any,
    ) -> Histogram:
        """Creates or retrieves a Prometheus Histogram metric.

        Args:
            name: The base name of the metric.
            description: A brief explanation of the metric.
            labels: An optional list of label names.
            buckets: Optional bucket boundaries; the client defaults are used otherwise.
            **kwargs: Additional keyword arguments passed to `prometheus_client.Histogram`.
        """
        if name not in self._metrics:
            if buckets is not None:
                kwargs["buckets"] = buckets
            self._metrics[name] = Histogram(
                name=name,
                documentation=description,
                labelnames=labels or [],
                namespace=self.namespace or "",
                registry=self.registry,
                **kwargs,
            )
        return self._metrics[name]  # type: ignore

    def generate_latest(self) -> bytes:
        """Returns the text exposition of every metric in this registry."""
        return generate_latest(self.registry)


UNKNOWN_FUNCTION_LABEL = "unknown"


class ChaincodeMetrics:
    """Invocation metrics recorded by `ChaincodeHost`.

    - `invocations_total{function,status}`: one increment per invocation,
      `status` is "ok" or "error". Function names the chaincode does not
      expose are all counted under `function="unknown"`.
    - `invocation_duration_seconds{function}`: wall time spent in the chaincode.
    """

    def __init__(self, namespace: str | None = "asset_chaincode") -> None:
        self.registry = PrometheusMetricsRegistry(namespace=namespace)
        self.invocations = self.registry.counter(
            "invocations_total",
            "Number of chaincode invocations by function and outcome",
            labels=["function", "status"],
        )
        self.duration = self.registry.histogram(
            "invocation_duration_seconds",
            "Time spent serving a chaincode invocation",
            labels=["function"],
            buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
        )

    def record(self, function: str, ok: bool, duration_seconds: float) -> None:
        """Records the outcome and duration of one invocation."""
        self.invocations.labels(function=function, status="ok" if ok else "error").inc()
        self.duration.labels(function=function).observe(duration_seconds)

    def invocation_count(self, function: str, status: str) -> float:
        """Returns the current value of `invocations_total` for one label set."""
        value = self.registry.registry.get_sample_value(
            f"{self.registry.namespace}_invocations_total" if self.registry.namespace else "invocations_total",
            {"function": function, "status": status},
        )
        return value or 0.0

    def render(self) -> str:
        """Returns the Prometheus text exposition as a string."""
        return self.registry.generate_latest().decode("utf-8")
