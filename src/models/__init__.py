"""Pydantic models for the customer pipeline and API payloads."""

from models.customer import (  # noqa: F401
    ChurnRiskLevel,
    Customer,
    CustomerDetail,
    CustomerInteraction,
    CustomerStage,
    CustomerSuccessMetrics,
    InteractionChannel,
    Pet,
)
from models.filters import (  # noqa: F401
    CustomerFilterState,
    CustomersHubFilterState,
    HealthRange,
    MrrRange,
    PetsBucket,
    SegmentTab,
    SortKey,
)
from models.overview import OverviewKpis  # noqa: F401
from models.owner import (  # noqa: F401
    DetailShape,
    RawOwnerRecord,
    RawPet,
    RawPetType,
    ResponseShape,
)
from models.results import (  # noqa: F401
    CustomerDetailResult,
    CustomersResult,
    FetchResult,
    OwnerLookupResult,
)
from models.segmentation import (  # noqa: F401
    CustomerSegment,
    CustomerSegmentationEntry,
    EnrichedCustomer,
    SegmentationSummary,
    SegmentSummary,
)
