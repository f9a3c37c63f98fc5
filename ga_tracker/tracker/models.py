from pydantic import BaseModel, ConfigDict


class TrackingConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    tracking_id: str
    report_address: str | None = None
