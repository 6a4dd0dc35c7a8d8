import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Cookie, Depends, Form, Request, Response
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from .config import settings
from .globals import session_store, templates, vocab_manager
from .models import SubmissionOutcome
from .quiz import next_question, submit_answer
from .sessions import SessionStore, UserSession
from .view_state import Section
from .vocabulary import VocabularyManager

logger = logging.getLogger(__name__)

router = APIRouter()


# --- Dependencies ---
def get_session_id(
    session_id: Optional[str] = Cookie(None, alias=settings.SESSION_COOKIE_NAME)
) -> Optional[str]:
    return session_id


def get_vocab_manager() -> VocabularyManager:
    return vocab_manager


def get_session_store() -> SessionStore:
    return session_store


def _set_session_cookie(response: Response, session_id: str) -> Response:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session_id,
        httponly=True,
        samesite="lax",
    )
    return response


def _redirect_home(session_id: str) -> RedirectResponse:
    return _set_session_cookie(RedirectResponse(url="/", status_code=303), session_id)


def _question_payload(user: UserSession) -> Optional[Dict[str, Any]]:
    quiz = user.quiz
    question = quiz.current_question
    if question is None:
        return None
    payload = {
        "entry_id": question.entry_id,
        "term": question.term,
        "reading": question.reading,
        "options": question.options,
    }
    # Hidden until the question is answered.
    if quiz.answered:
        payload["correct_answer"] = question.correct_answer
    return payload


def _quiz_payload(user: UserSession) -> Dict[str, Any]:
    quiz = user.quiz
    return {
        "deck": user.deck,
        "state": quiz.state.value,
        "question": _question_payload(user),
        "answered": quiz.answered,
        "last_answer_correct": quiz.last_answer_correct,
        "score": quiz.score,
        "total": quiz.total,
        "skipped": quiz.skipped,
        "score_percentage": quiz.score_percentage,
    }


# --- Pages ---
@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    session_id: Optional[str] = Depends(get_session_id),
    vocab: VocabularyManager = Depends(get_vocab_manager),
    store: SessionStore = Depends(get_session_store),
):
    session_id, user = store.get_or_create(session_id)
    context = {
        "view": user.view,
        "sections": list(Section),
        "deck": user.deck,
        "entries": vocab.get_entries(user.deck),
        "grammar": vocab.get_grammar(),
        "quiz": user.quiz,
    }
    response = templates.TemplateResponse(request, "index.html", context)
    return _set_session_cookie(response, session_id)


@router.post("/navigate")
async def navigate(
    section: str = Form(...),
    session_id: Optional[str] = Depends(get_session_id),
    vocab: VocabularyManager = Depends(get_vocab_manager),
    store: SessionStore = Depends(get_session_store),
):
    try:
        target = Section(section)
    except ValueError:
        return JSONResponse({"error": f"Unknown section '{section}'"}, status_code=400)

    session_id, user = store.get_or_create(session_id)
    if target is Section.QUIZ:
        next_question(user.quiz, vocab.get_entries(user.deck))
    user.view.navigate(target)
    return _redirect_home(session_id)


@router.post("/cards/{card_id}/toggle")
async def toggle_card(
    card_id: int,
    session_id: Optional[str] = Depends(get_session_id),
    vocab: VocabularyManager = Depends(get_vocab_manager),
    store: SessionStore = Depends(get_session_store),
):
    session_id, user = store.get_or_create(session_id)
    if vocab.get_entry(user.deck, card_id) is None:
        return JSONResponse({"error": "Card not found"}, status_code=404)
    user.view.toggle_card(card_id)
    return _redirect_home(session_id)


@router.post("/quiz/answer")
async def answer_page(
    answer: str = Form(...),
    session_id: Optional[str] = Depends(get_session_id),
    store: SessionStore = Depends(get_session_store),
):
    submit_answer(store.get_or_blank(session_id).quiz, answer)
    return RedirectResponse(url="/", status_code=303)


@router.post("/quiz/next")
async def next_page(
    session_id: Optional[str] = Depends(get_session_id),
    vocab: VocabularyManager = Depends(get_vocab_manager),
    store: SessionStore = Depends(get_session_store),
):
    session_id, user = store.get_or_create(session_id)
    next_question(user.quiz, vocab.get_entries(user.deck))
    return _redirect_home(session_id)


# --- JSON API ---
@router.get("/api/decks")
async def get_decks(vocab: VocabularyManager = Depends(get_vocab_manager)):
    return vocab.get_decks()


@router.get("/api/vocabulary")
async def get_vocabulary(
    deck: str = settings.DEFAULT_DECK,
    vocab: VocabularyManager = Depends(get_vocab_manager),
):
    if not vocab.has_deck(deck):
        return JSONResponse({"error": f"Unknown deck '{deck}'"}, status_code=404)
    return {
        "deck": deck,
        "categories": vocab.get_categories(deck),
        "entries": vocab.get_entries(deck),
    }


@router.get("/api/grammar")
async def get_grammar(vocab: VocabularyManager = Depends(get_vocab_manager)):
    return vocab.get_grammar()


@router.get("/api/quiz")
async def get_quiz(
    session_id: Optional[str] = Depends(get_session_id),
    store: SessionStore = Depends(get_session_store),
):
    return _quiz_payload(store.get_or_blank(session_id))


@router.post("/api/quiz/next")
async def api_next_question(
    response: Response,
    deck: Optional[str] = Form(None),
    session_id: Optional[str] = Depends(get_session_id),
    vocab: VocabularyManager = Depends(get_vocab_manager),
    store: SessionStore = Depends(get_session_store),
):
    if deck is not None and not vocab.has_deck(deck):
        return JSONResponse({"error": f"Unknown deck '{deck}'"}, status_code=404)

    session_id, user = store.get_or_create(session_id)
    target_deck = deck if deck is not None else user.deck
    # Switch decks only once a question could be built from the new one.
    next_question(user.quiz, vocab.get_entries(target_deck))
    user.deck = target_deck
    _set_session_cookie(response, session_id)
    return _quiz_payload(user)


@router.post("/api/quiz/answer", response_model=SubmissionOutcome)
async def api_submit_answer(
    answer: str = Form(...),
    session_id: Optional[str] = Depends(get_session_id),
    store: SessionStore = Depends(get_session_store),
):
    outcome = submit_answer(store.get_or_blank(session_id).quiz, answer)
    if not outcome.recorded:
        logger.info(f"Ignored submission for session {session_id}")
    return outcome


@router.post("/api/reset")
async def reset_session(
    response: Response,
    session_id: Optional[str] = Depends(get_session_id),
    store: SessionStore = Depends(get_session_store),
):
    store.discard(session_id)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"status": "success"}
