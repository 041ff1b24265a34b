"""
Application-wide constants: product identity, pricing, AI parameters,
storage limits and the route table shared with the frontend.

Both `APP_CONFIG` and `ROUTES` are frozen pydantic models built once at
import time. Assigning to any field raises `ValidationError`, so any
number of requests may read them concurrently.

`model_dump(by_alias=True)` emits the camelCase keys the frontend uses
(`maxTokens`, `generateResume`, ...).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class PriceConfig(_Frozen):
    amount: int      # minor units (paise)
    currency: str
    display: str


class AIConfig(_Frozen):
    model: str
    max_tokens: int
    temperature: float


class StorageConfig(_Frozen):
    bucket: str
    max_file_size: int  # bytes


class AppConfig(_Frozen):
    name: str
    description: str
    domain: str
    price: PriceConfig
    ai: AIConfig
    storage: StorageConfig


class ApiRoutes(_Frozen):
    generate_resume: str
    create_payment: str
    webhook: str
    download: str


class RouteTable(_Frozen):
    home: str
    dashboard: str
    api: ApiRoutes


APP_CONFIG = AppConfig(
    name="CrackBase Resume AI",
    description="AI-Powered Resume Builder for Students and Freshers",
    domain="resume.crackbase.in",
    price=PriceConfig(
        amount=4900,  # ₹49 in paise
        currency="INR",
        display="₹49",
    ),
    ai=AIConfig(
        model="gpt-4o-mini",
        max_tokens=2000,
        temperature=0.7,
    ),
    storage=StorageConfig(
        bucket="resume-files",
        max_file_size=5 * 1024 * 1024,  # 5 MB
    ),
)

ROUTES = RouteTable(
    home="/",
    dashboard="/dashboard",
    api=ApiRoutes(
        generate_resume="/api/generate-resume",
        create_payment="/api/payment/create",
        webhook="/api/payment/webhook",
        download="/api/download",
    ),
)
