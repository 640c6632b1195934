from adapters.cross_reference import Gazetteer, RegexReferenceDetector, detect_references, referenced_items
from contracts import ConversationScript, EntityType, KnowledgeArticle, Procedure, System


def _gaz(**pools) -> Gazetteer:
    return Gazetteer.from_entities(**pools)


def test_empty_gazetteer_detects_nothing():
    assert detect_references("Follow Onboarding, then open CRM.", _gaz()) == []


def test_detects_hebrew_procedure_title():
    gaz = _gaz(procedures=[Procedure(id="p1", title="החזרת מוצר")])

    refs = detect_references("יש לבצע נוהל החזרת מוצר כאן", gaz)

    assert len(refs) == 1
    assert refs[0].type == EntityType.PROCEDURE
    assert refs[0].id == "p1"
    assert refs[0].title == "החזרת מוצר"
    assert refs[0].matched_text == "החזרת מוצר"


def test_empty_title_never_matches():
    gaz = _gaz(procedures=[Procedure(id="p1", title="")], systems=[System(id="s1", name="   ")])

    assert detect_references("", gaz) == []
    assert detect_references("any text at all", gaz) == []


def test_metacharacter_title_matches_literally():
    gaz = _gaz(scripts=[ConversationScript(id="c1", title="שאלה? (תמיכה)")])

    assert [r.id for r in detect_references("ראו שאלה? (תמיכה) למטה", gaz)] == ["c1"]
    assert detect_references("ראו שאלה (תמיכה) למטה", gaz) == []


def test_same_title_in_two_pools_fires_twice_in_pool_order():
    gaz = _gaz(
        systems=[System(id="s1", name="Sales")],
        procedures=[Procedure(id="p1", title="Sales")],
    )

    refs = detect_references("Talk to Sales today", gaz)

    assert [(r.type, r.id) for r in refs] == [(EntityType.PROCEDURE, "p1"), (EntityType.SYSTEM, "s1")]


def test_substring_titles_are_not_suppressed():
    gaz = _gaz(
        procedures=[Procedure(id="p1", title="Sales")],
        articles=[KnowledgeArticle(id="a1", title="SalesForce")],
    )

    refs = detect_references("Open SalesForce", gaz)

    assert [r.id for r in refs] == ["p1", "a1"]


def test_one_reference_per_entity_regardless_of_occurrences():
    gaz = _gaz(systems=[System(id="s1", name="CRM"), System(id="s1", name="CRM")])

    refs = detect_references("CRM, CRM and crm", gaz)

    assert len(refs) == 1


def test_qualified_form_reports_bare_title():
    gaz = _gaz(systems=[System(id="s1", name="  CRM ")])

    refs = detect_references("היכנסו למערכת crm", gaz) + detect_references("מערכת   CRM", gaz)

    assert [r.matched_text for r in refs] == ["CRM", "CRM"]


def test_end_to_end_scenario():
    gaz = _gaz(
        procedures=[Procedure(id="p1", title="Onboarding")],
        systems=[System(id="s1", name="CRM")],
    )

    refs = detect_references("Follow Onboarding, then open CRM.", gaz)

    assert [(r.type, r.id, r.title) for r in refs] == [
        (EntityType.PROCEDURE, "p1", "Onboarding"),
        (EntityType.SYSTEM, "s1", "CRM"),
    ]


def test_referenced_items_projection():
    gaz = _gaz(articles=[KnowledgeArticle(id="a1", title="FAQ")])

    items = referenced_items("see the faq", gaz)

    assert [item.model_dump() for item in items] == [
        {"type": EntityType.ARTICLE, "id": "a1", "title": "FAQ"},
    ]


def test_find_spans_reports_every_occurrence_with_offsets():
    gaz = _gaz(procedures=[Procedure(id="p1", title="Alpha")])
    text = "alpha, נוהל Alpha"

    spans = RegexReferenceDetector().find_spans(text, gaz)

    assert [(s.start, s.end, s.text) for s in spans] == [(0, 5, "alpha"), (7, 17, "נוהל Alpha")]


def test_detection_is_deterministic():
    gaz = _gaz(
        procedures=[Procedure(id="p1", title="Onboarding")],
        systems=[System(id="s1", name="CRM")],
    )
    text = "Follow Onboarding, then open CRM."

    first = [r.model_dump_json() for r in detect_references(text, gaz)]
    second = [r.model_dump_json() for r in detect_references(text, gaz)]

    assert first == second
