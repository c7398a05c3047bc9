from gocardless_client.resources.base import ApiListResponse, ApiResponse, Cursors, ListMeta, Resource
from gocardless_client.resources.billing_request import BillingRequest, BillingRequestStatus
from gocardless_client.resources.block import Block, BlockReasonType, BlockType
from gocardless_client.resources.creditor import Creditor
from gocardless_client.resources.event import Event, EventResourceType
from gocardless_client.resources.instalment_schedule import InstalmentSchedule, InstalmentScheduleStatus
from gocardless_client.resources.mandate import Mandate, MandateStatus
from gocardless_client.resources.outbound_payment import OutboundPayment, OutboundPaymentStatus
from gocardless_client.resources.payout import Payout, PayoutStatus, PayoutType
from gocardless_client.resources.verification_detail import VerificationDetail

__all__ = [
    "ApiListResponse",
    "ApiResponse",
    "BillingRequest",
    "BillingRequestStatus",
    "Block",
    "BlockReasonType",
    "BlockType",
    "Creditor",
    "Cursors",
    "Event",
    "EventResourceType",
    "InstalmentSchedule",
    "InstalmentScheduleStatus",
    "ListMeta",
    "Mandate",
    "MandateStatus",
    "OutboundPayment",
    "OutboundPaymentStatus",
    "Payout",
    "PayoutStatus",
    "PayoutType",
    "Resource",
    "VerificationDetail",
]
