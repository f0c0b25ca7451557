"""Pydantic schemas for the property back-office API."""

from backoffice.schemas.base import *
from backoffice.schemas.location import *
from backoffice.schemas.pagination import *
from backoffice.schemas.directory import *
from backoffice.schemas.move_in import *
from backoffice.schemas.move_out import *
from backoffice.schemas.notice_and_eviction import *
from backoffice.schemas.payment import *
from backoffice.schemas.vendor_task import *
