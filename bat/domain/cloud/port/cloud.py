"""Contract every cloud provider adapter (CPI) fulfils.

Adapters override the operations their infrastructure supports. Anything left
unimplemented raises :class:`CloudNotImplementedError` naming the operation
and the adapter, so callers can tell an unsupported call apart from a failure.
"""

from typing import Any

from bat.domain.shared.error import CloudNotImplementedError


class Cloud:
    """Base class for cloud provider adapters."""

    def _not_implemented(self, operation: str) -> CloudNotImplementedError:
        cls = type(self)
        return CloudNotImplementedError(operation, f"{cls.__module__}.{cls.__qualname__}")

    def current_vm_id(self) -> str:
        raise self._not_implemented("current_vm_id")

    def create_stemcell(self, image_path: str, cloud_properties: dict[str, Any]) -> str:
        raise self._not_implemented("create_stemcell")

    def delete_stemcell(self, stemcell_id: str) -> None:
        raise self._not_implemented("delete_stemcell")

    def create_vm(
        self,
        agent_id: str,
        stemcell_id: str,
        resource_pool: dict[str, Any],
        networks: dict[str, Any],
        disk_locality: list[str] | None = None,
        env: dict[str, Any] | None = None,
    ) -> str:
        raise self._not_implemented("create_vm")

    def delete_vm(self, vm_id: str) -> None:
        raise self._not_implemented("delete_vm")

    def has_vm(self, vm_id: str) -> bool:
        raise self._not_implemented("has_vm")

    def reboot_vm(self, vm_id: str) -> None:
        raise self._not_implemented("reboot_vm")

    def set_vm_metadata(self, vm_id: str, metadata: dict[str, str]) -> None:
        raise self._not_implemented("set_vm_metadata")

    def create_disk(self, size: int, vm_locality: str | None = None) -> str:
        raise self._not_implemented("create_disk")

    def delete_disk(self, disk_id: str) -> None:
        raise self._not_implemented("delete_disk")

    def attach_disk(self, vm_id: str, disk_id: str) -> None:
        raise self._not_implemented("attach_disk")

    def detach_disk(self, vm_id: str, disk_id: str) -> None:
        raise self._not_implemented("detach_disk")

    def get_disks(self, vm_id: str) -> list[str]:
        raise self._not_implemented("get_disks")

    def snapshot_disk(self, disk_id: str, metadata: dict[str, Any] | None = None) -> str:
        raise self._not_implemented("snapshot_disk")

    def delete_snapshot(self, snapshot_id: str) -> None:
        raise self._not_implemented("delete_snapshot")

    def validate_deployment(self, current: dict[str, Any], desired: dict[str, Any]) -> None:
        """Check that ``desired`` can be deployed over ``current``."""
        raise self._not_implemented("validate_deployment")
