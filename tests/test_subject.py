from academia.subject import Subject, compare_subject_by_id


def test_create_subject():
    s = Subject.create("Matemáticas", 6)
    assert s.name == "Matemáticas"
    assert s.credits == 6
    assert len(s.correlatives) == 0


def test_create_assigns_sequential_ids():
    a = Subject.create("A", 1)
    b = Subject.create("B", 1)
    assert b.id == a.id + 1


def test_name_is_truncated():
    s = Subject.create("x" * 150, 3)
    assert len(s.name) == 99


def test_correlatives_list():
    s = Subject.create("Física", 5)
    s.correlatives.append(1)
    s.correlatives.append(2)
    assert len(s.correlatives) == 2
    assert set(s.correlatives) == {1, 2}


def test_subject_to_string():
    s = Subject(7, "Química", 4)
    s.correlatives.append(3)
    assert str(s) == "[ID: 7] Química | Credits: 4 | Correlatives: 1"


def test_compare_subject_by_id():
    s1 = Subject.create("Historia", 3)
    s2 = Subject.create("Geografía", 3)
    assert compare_subject_by_id(s1, s1) is True
    assert compare_subject_by_id(s1, s2) is False
    assert compare_subject_by_id(None, s2) is False
    assert compare_subject_by_id(s1, None) is False


def test_compare_by_id_ignores_other_fields():
    assert compare_subject_by_id(Subject(5, "A", 1), Subject(5, "B", 9)) is True