from bat.domain.cloud.port.cloud import Cloud

__all__ = ["Cloud"]
