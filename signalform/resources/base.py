"""
Generic Pulumi dynamic provider for SignalFx REST resources.

Each resource type declares its schema, collection and payload builder;
this base turns Pulumi's check/diff/create/read/update/delete calls into
URL formatting, payload assembly and one call to SignalFxResourceClient.

Dependencies: pulumi, pydantic
System role: CRUD dispatcher shared by every resource type
"""

from typing import Any, ClassVar
from urllib.parse import quote

from pulumi.dynamic import (
    CheckFailure,
    CheckResult,
    CreateResult,
    DiffResult,
    ReadResult,
    ResourceProvider,
    UpdateResult,
)
from pydantic import BaseModel, ValidationError

from signalform.boundary.resource_client import SignalFxResourceClient
from signalform.configs.base import ProviderConfig
from signalform.errors import (
    ResourceNotFoundError,
    ResourceRequestError,
    ResourceValidationError,
)
from signalform.observability import get_logger
from signalform.resources.payload import encode_payload
from signalform.utils.inputs import public_props

logger = get_logger(__name__)


class RestResourceProvider(ResourceProvider):
    """
    Base dynamic provider for one SignalFx resource collection.

    Subclasses set:
        resource_type: Key into API_PATHS ("dashboard", "org_token")
        args_model: pydantic model of the resource inputs
        replace_on: Input names whose change forces a replacement

    and implement build_payload().
    """

    resource_type: ClassVar[str]
    args_model: ClassVar[type[BaseModel]]
    replace_on: ClassVar[tuple[str, ...]] = ()

    # Inputs that are bookkeeping only and never trigger an update by themselves
    untracked_inputs: ClassVar[frozenset[str]] = frozenset({"synced"})

    def __init__(self, config: ProviderConfig) -> None:
        """
        Initialize provider.

        Args:
            config: Provider configuration; pickled into the Pulumi state
        """
        super().__init__()
        self._config = config

    # --- hooks -----------------------------------------------------------

    def build_payload(self, args: BaseModel) -> dict[str, Any]:
        raise NotImplementedError

    def resource_id(self, args: BaseModel, response: dict[str, Any] | None) -> str:
        """Remote identifier of a newly created resource."""
        if not response or not response.get("id"):
            raise ResourceRequestError(
                f"Failed to create {self.resource_type}: response has no id",
                operation="create",
                url=self.collection_url,
                body=response,
            )
        return response["id"]

    def response_outputs(self, response: dict[str, Any] | None) -> dict[str, Any]:
        """Computed outputs taken from an API response."""
        response = response or {}
        return {"last_updated": response.get("lastUpdated")}

    def response_inputs(self, response: dict[str, Any]) -> dict[str, Any]:
        """Inputs rebuilt from a remote resource; used when reading by id alone."""
        return {}

    # --- helpers ---------------------------------------------------------

    @property
    def collection_url(self) -> str:
        return self._config.collection_url(self.resource_type)

    def resource_url(self, id_: str) -> str:
        return f"{self.collection_url}/{quote(id_, safe='')}"

    def client(self) -> SignalFxResourceClient:
        return SignalFxResourceClient(self._config)

    def parse_args(self, props: dict[str, Any]) -> BaseModel:
        """
        Validate raw Pulumi properties against the resource schema.

        Raises:
            ResourceValidationError: If the inputs are invalid
        """
        try:
            return self.args_model.model_validate(public_props(props))
        except ValidationError as e:
            raise ResourceValidationError.from_pydantic(self.resource_type, e) from e

    def build_body(self, args: BaseModel) -> bytes:
        return encode_payload(self.build_payload(args))

    # --- ResourceProvider ------------------------------------------------

    def check(self, _olds: dict[str, Any], news: dict[str, Any]) -> CheckResult:
        """Validate new inputs; failures stop Pulumi before any network call."""
        failures = []
        try:
            self.args_model.model_validate(public_props(news))
        except ValidationError as e:
            for error in e.errors():
                prop = str(error["loc"][0]) if error["loc"] else ""
                failures.append(CheckFailure(prop, error["msg"]))
        return CheckResult(news, failures)

    def diff(self, _id: str, olds: dict[str, Any], news: dict[str, Any]) -> DiffResult:
        """
        Compare recorded and desired inputs.

        A recorded synced=False (drift found by read) forces an update even
        when the inputs are unchanged.
        """
        new_inputs = self.parse_args(news).model_dump()
        try:
            old_inputs = self.args_model.model_validate(public_props(olds)).model_dump()
        except ValidationError:
            old_inputs = {}

        changed = [
            key
            for key in new_inputs
            if key not in self.untracked_inputs and old_inputs.get(key) != new_inputs[key]
        ]
        drifted = olds.get("synced") is False
        replaces = [key for key in changed if key in self.replace_on]

        if drifted:
            logger.info(f"{self.resource_type} {_id} drifted from its configuration")

        return DiffResult(
            changes=bool(changed) or drifted,
            replaces=replaces,
            stables=[],
            delete_before_replace=bool(replaces),
        )

    def create(self, props: dict[str, Any]) -> CreateResult:
        args = self.parse_args(props)
        with self.client() as client:
            response = client.create(self.collection_url, self.build_body(args))
        id_ = self.resource_id(args, response)
        logger.info(f"Created {self.resource_type} {id_}")
        outs = {**args.model_dump(), **self.response_outputs(response), "synced": True}
        return CreateResult(id_, outs)

    def read(self, id_: str, props: dict[str, Any]) -> ReadResult:
        """
        Read the remote resource back.

        Returns an empty id when the resource no longer exists, otherwise the
        recorded properties with synced=False if the remote lastUpdated moved.
        With no recorded properties (import), they are rebuilt from the remote
        resource.
        """
        try:
            with self.client() as client:
                response = client.read(self.resource_url(id_)) or {}
        except ResourceNotFoundError:
            logger.warning(f"{self.resource_type} {id_} no longer exists")
            return ReadResult("", {})

        outs = public_props(props)
        if not outs:
            logger.info(f"Importing {self.resource_type} {id_} from its remote state")
            outs = {**self.response_inputs(response), **self.response_outputs(response)}
        remote_updated = response.get("lastUpdated")
        recorded_updated = outs.get("last_updated")
        outs["synced"] = recorded_updated is None or remote_updated == recorded_updated
        if not outs["synced"]:
            logger.info(
                f"{self.resource_type} {id_} changed remotely "
                f"(lastUpdated {recorded_updated} -> {remote_updated})"
            )
        return ReadResult(id_, outs)

    def update(self, _id: str, olds: dict[str, Any], news: dict[str, Any]) -> UpdateResult:
        args = self.parse_args(news)
        with self.client() as client:
            response = client.update(self.resource_url(_id), self.build_body(args))
        logger.info(f"Updated {self.resource_type} {_id}")
        # Outputs missing from the response keep their recorded values
        outputs = {
            key: value
            for key, value in self.response_outputs(response).items()
            if value is not None
        }
        outs = {**public_props(olds), **args.model_dump(), **outputs, "synced": True}
        return UpdateResult(outs)

    def delete(self, _id: str, _props: dict[str, Any]) -> None:
        try:
            with self.client() as client:
                client.delete(self.resource_url(_id))
        except ResourceNotFoundError:
            logger.info(f"{self.resource_type} {_id} already deleted")
            return
        logger.info(f"Deleted {self.resource_type} {_id}")
