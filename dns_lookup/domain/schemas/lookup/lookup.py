from enum import Enum

from pydantic import BaseModel, Field

UPDATE_KEYWORD = "update"


class ErrorCode(Enum):
    MISSING_DOMAIN_PARAMETER = "MissingDomainParameter"
    DNS_NOT_FOUND = "DnsNotFound"
    STORE_UNAVAILABLE = "StoreUnavailable"


class LookupRequest(BaseModel):
    domain: str = Field(default="")
    update: str = Field(default="")

    @property
    def force_update(self) -> bool:
        return self.update == UPDATE_KEYWORD


class LookupResult(BaseModel):
    domain: str
    data: str
    last_updated: str
    minutes_till_manual_update: int | None = None
    hours_till_auto_update: int | None = None


class ErrorResponse(BaseModel):
    type: str = "error"
    code: ErrorCode
    message: str

    @classmethod
    def missing_domain_parameter(cls) -> "ErrorResponse":
        return cls(
            code=ErrorCode.MISSING_DOMAIN_PARAMETER,
            message="Domain parameter must be provided.",
        )

    @classmethod
    def dns_not_found(cls, domain: str) -> "ErrorResponse":
        return cls(
            code=ErrorCode.DNS_NOT_FOUND,
            message=(
                f'Sorry, there was a problem looking up the DNS for "{domain}".'
                " Please try a different domain or retry later."
            ),
        )

    @classmethod
    def store_unavailable(cls) -> "ErrorResponse":
        return cls(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="Sorry, the DNS cache is currently unavailable. Please retry later.",
        )


LookupResponse = LookupResult | ErrorResponse


def to_json(response: LookupResponse) -> str:
    return response.model_dump_json(exclude_none=True)
