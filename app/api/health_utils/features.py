from datetime import datetime, timezone

from app.models.health import FeatureDescriptor, FeatureStatus

# (name, description)
DEVOPS_FEATURES = [
    (
        "CI/CD Pipeline",
        "Automated build, test, and deployment pipeline using AWS CodePipeline",
    ),
    ("Blue-Green Deployment", "Zero-downtime deployment strategy with AWS CodeDeploy"),
    ("Container Orchestration", "Docker containers managed by Amazon ECS"),
    ("Load Balancing", "Application Load Balancer for traffic distribution"),
    ("Auto Scaling", "Automatic scaling based on CPU and memory metrics"),
    ("Monitoring", "CloudWatch metrics, logs, and alarms"),
]


def build_feature_list(now: datetime | None = None) -> list[FeatureDescriptor]:
    """Fixed feature catalogue stamped with the current time."""
    now = now or datetime.now(timezone.utc)
    return [
        FeatureDescriptor(
            name=name,
            description=description,
            status=FeatureStatus.ACTIVE,
            last_updated=now,
        )
        for name, description in DEVOPS_FEATURES
    ]
