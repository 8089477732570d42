from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints


class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# 공백만 있는 문자열도 빈 값으로 처리
NotBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
