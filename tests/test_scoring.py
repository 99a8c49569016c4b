from srordle.models.game import LetterStatus as S
from srordle.models.shape import Row
from srordle.services.scoring import score, target_frequencies

T, F = True, False


def statuses(answers):
    return [a.status for a in answers]


def letters(answers):
    return "".join(a.letter or "." for a in answers)


def test_exact_guess_is_all_correct() -> None:
    answers = score("telling", Row.full(7), ["telling"])
    assert statuses(answers) == [S.CORRECT] * 7
    assert letters(answers) == "telling"


def test_duplicate_letters_consume_frequencies_left_to_right() -> None:
    answers = score("robot", Row.full(5), ["boots"])
    assert statuses(answers) == [
        S.WRONG_POSITION,
        S.CORRECT,
        S.WRONG_POSITION,
        S.WRONG_POSITION,
        S.NOT_IN_WORD,
    ]


def test_correct_pass_runs_before_misplaced_pass() -> None:
    # The last slot is correct, so the earlier 'l' has none left to claim
    answers = score("abcdl", Row.full(5), ["lxyzl"])
    assert statuses(answers) == [S.NOT_IN_WORD, S.NOT_IN_WORD, S.NOT_IN_WORD, S.NOT_IN_WORD, S.CORRECT]

    answers = score("abcll", Row.full(5), ["lxyzl"])
    assert statuses(answers) == [S.WRONG_POSITION, S.NOT_IN_WORD, S.NOT_IN_WORD, S.NOT_IN_WORD, S.CORRECT]


def test_segments_land_on_their_board_slots() -> None:
    row = Row([T, T, T, F, T, T, T])
    answers = score("telling", row, ["all", "ill"])
    assert letters(answers) == "all.ill"
    assert statuses(answers) == [
        S.NOT_IN_WORD,
        S.WRONG_POSITION,
        S.CORRECT,
        S.POSITION_NOT_USED,
        S.CORRECT,
        S.NOT_IN_WORD,
        S.NOT_IN_WORD,
    ]


def test_letters_in_uncovered_slots_count_as_available() -> None:
    # Only slots 2-4 ("lli") are guessed, yet g, e and t sit in the
    # uncovered slots of the target and still mark the guess as misplaced.
    row = Row([F, F, T, T, T, F, F])
    answers = score("telling", row, ["get"])
    assert letters(answers) == "..get.."
    assert statuses(answers) == [
        S.POSITION_NOT_USED,
        S.POSITION_NOT_USED,
        S.WRONG_POSITION,
        S.WRONG_POSITION,
        S.WRONG_POSITION,
        S.POSITION_NOT_USED,
        S.POSITION_NOT_USED,
    ]


def test_uncovered_slots_have_empty_letters() -> None:
    row = Row([F, T, T, T, T, T, F])
    answers = score("telling", row, ["guess"])
    assert answers[0].letter == ""
    assert answers[6].letter == ""
    assert answers[0].status == S.POSITION_NOT_USED


def test_scoring_is_repeatable() -> None:
    row = Row([T, T, T, T, F, T, T])
    first = score("telling", row, ["tell", "in"])
    second = score("telling", row, ["tell", "in"])
    assert first == second


def test_target_frequencies_counts_whole_word() -> None:
    assert target_frequencies("robot") == {"r": 1, "o": 2, "b": 1, "t": 1}


def test_letter_answer_wire_form() -> None:
    answer = score("telling", Row.full(7), ["telling"])[0]
    assert answer.to_dict() == {"Letter": "t", "Status": 3}
