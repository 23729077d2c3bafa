from typing import Annotated

from pydantic import Field

# strict: bool и строки не принимаются за число
StrictNonNegativeInt = Annotated[int, Field(ge=0, strict=True)]
