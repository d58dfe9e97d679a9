from bat.infrastructure.cloud.aws import AwsCloud

__all__ = ["AwsCloud"]
