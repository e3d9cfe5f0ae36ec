from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

# Documents are stored as sent. These views only give names to the
# fields the handlers read, nothing is enforced or coerced.

class DocumentView(BaseModel):
    model_config = ConfigDict(extra='allow', populate_by_name=True)

    id: Optional[Any] = Field(default=None, alias='_id')


class CoffeeItem(DocumentView):
    name: Optional[Any] = None
    price: Optional[Any] = None
    description: Optional[Any] = None


class UserRecord(DocumentView):
    email: Optional[Any] = None
    lastSignInTime: Optional[Any] = None
