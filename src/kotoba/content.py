"""Built-in lesson content: the ``core`` vocabulary deck and grammar patterns."""

from typing import List

from .models import GrammarPoint, VocabularyEntry

CORE_VOCABULARY: List[VocabularyEntry] = [
    VocabularyEntry(id=1, term="愛", reading="あい", translation="사랑", category="감정"),
    VocabularyEntry(id=2, term="桜", reading="さくら", translation="벚꽃", category="자연"),
    VocabularyEntry(id=3, term="月", reading="つき", translation="달", category="자연"),
    VocabularyEntry(id=4, term="夢", reading="ゆめ", translation="꿈", category="감정"),
    VocabularyEntry(id=5, term="風", reading="かぜ", translation="바람", category="자연"),
    VocabularyEntry(id=6, term="友達", reading="ともだち", translation="친구", category="관계"),
    VocabularyEntry(id=7, term="海", reading="うみ", translation="바다", category="자연"),
    VocabularyEntry(id=8, term="花", reading="はな", translation="꽃", category="자연"),
    VocabularyEntry(id=9, term="心", reading="こころ", translation="마음", category="감정"),
    VocabularyEntry(id=10, term="空", reading="そら", translation="하늘", category="자연"),
    VocabularyEntry(id=11, term="本", reading="ほん", translation="책", category="물건"),
    VocabularyEntry(id=12, term="時間", reading="じかん", translation="시간", category="개념"),
]

GRAMMAR_POINTS: List[GrammarPoint] = [
    GrammarPoint(
        pattern="~です",
        translation="~입니다",
        example="学生です",
        example_translation="학생입니다",
    ),
    GrammarPoint(
        pattern="~ます",
        translation="~합니다",
        example="食べます",
        example_translation="먹습니다",
    ),
    GrammarPoint(
        pattern="~たい",
        translation="~고 싶다",
        example="行きたい",
        example_translation="가고 싶다",
    ),
    GrammarPoint(
        pattern="~ている",
        translation="~하고 있다",
        example="読んでいる",
        example_translation="읽고 있다",
    ),
]
