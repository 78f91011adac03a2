from fastapi import APIRouter, Depends
from sqlmodel import Session, select
from app.api.v1.dependencies import require_user
from app.core.database import get_session
from app.models import Language
from app.schemas.language import LanguagesResponse, LanguageResponse

router = APIRouter(prefix="/languages", tags=["languages"], dependencies=[Depends(require_user)])


@router.get("", response_model=LanguagesResponse)
async def get_languages(
    session: Session = Depends(get_session)
):
    """Get all available languages."""
    languages = session.exec(select(Language).order_by(Language.code)).all()
    return LanguagesResponse(
        data=[LanguageResponse(code=lang.code, name=lang.name) for lang in languages]
    )
