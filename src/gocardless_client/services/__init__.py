from gocardless_client.services.billing_requests import BillingRequestService
from gocardless_client.services.blocks import BlockService
from gocardless_client.services.creditors import CreditorService
from gocardless_client.services.events import EventService
from gocardless_client.services.instalment_schedules import InstalmentScheduleService
from gocardless_client.services.mandates import MandateService
from gocardless_client.services.outbound_payments import OutboundPaymentService
from gocardless_client.services.payouts import PayoutService
from gocardless_client.services.verification_details import VerificationDetailService

__all__ = [
    "BillingRequestService",
    "BlockService",
    "CreditorService",
    "EventService",
    "InstalmentScheduleService",
    "MandateService",
    "OutboundPaymentService",
    "PayoutService",
    "VerificationDetailService",
]
