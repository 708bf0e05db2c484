from models.metrics import Metrics, UserModelMetrics, UserModelMetricsPayload

__all__ = ["Metrics", "UserModelMetrics", "UserModelMetricsPayload"]
