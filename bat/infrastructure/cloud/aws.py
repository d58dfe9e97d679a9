from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from bat.domain.cloud.port.cloud import Cloud
from bat.domain.shared.error import ConfigurationError


class AwsOptions(BaseModel):
    region: str
    access_key_id: str
    secret_access_key: str
    default_key_name: str | None = None
    default_security_groups: list[str] = []
    ec2_endpoint: str | None = None  # overrides the regional endpoint


class AwsCloudOptions(BaseModel):
    aws: AwsOptions
    registry: dict[str, Any] = Field(default_factory=dict)


class AwsCloud(Cloud):
    """Cloud adapter for AWS. Operations are inherited from :class:`Cloud`."""

    def __init__(self, options: Mapping[str, Any]):
        try:
            self.options = AwsCloudOptions.model_validate(dict(options))
        except PydanticValidationError as e:
            err = e.errors()[0]
            field = ".".join(str(part) for part in err["loc"])
            raise ConfigurationError(
                f"Invalid AWS cloud options: {field}: {err['msg']}", field=field
            ) from e

    @property
    def region(self) -> str:
        return self.options.aws.region
