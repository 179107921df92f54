from wger_sync.transform import (
    translate_exercise_name, determine_category, determine_muscle_group,
    determine_equipment, transform_exercise, transform_exercises,
)
from wger_sync.types import Exercise, WgerExercise


def test_translate_known_and_unknown_names():
    assert translate_exercise_name('Bench Press') == 'Développé couché'
    assert translate_exercise_name('Lunge') == 'Fente'
    assert translate_exercise_name('Zercher Squat') == 'Zercher Squat'


def test_translate_uses_given_table():
    assert translate_exercise_name('Hip Thrust', {'Hip Thrust': 'Poussée de hanche'}) == 'Poussée de hanche'
    assert translate_exercise_name('Bench Press', {}) == 'Bench Press'


def test_category_mapping_and_default(make_record):
    assert determine_category(WgerExercise.from_api(make_record(1, 'a', category=14))) == 'cardio'
    assert determine_category(WgerExercise.from_api(make_record(1, 'a', category=15))) == 'flexibility'
    assert determine_category(WgerExercise.from_api(make_record(1, 'a', category=12))) == 'strength'
    assert determine_category(WgerExercise.from_api(make_record(1, 'a', category=999))) == 'strength'


def test_muscle_group_uses_first_muscle(make_record):
    ex = WgerExercise.from_api(make_record(1, 'a', muscles=[9, 1]))
    assert determine_muscle_group(ex) == 'shoulders'


def test_muscle_group_defaults_to_full_body(make_record):
    assert determine_muscle_group(WgerExercise.from_api(make_record(1, 'a'))) == 'full_body'
    assert determine_muscle_group(WgerExercise.from_api(make_record(1, 'a', muscles=[3]))) == 'full_body'


def test_equipment_defaults(make_record):
    assert determine_equipment(WgerExercise.from_api(make_record(1, 'a'))) == 'bodyweight'
    assert determine_equipment(WgerExercise.from_api(make_record(1, 'a', equipment=[42]))) == 'none'
    assert determine_equipment(WgerExercise.from_api(make_record(1, 'a', equipment=[7, 1]))) == 'kettlebell'


def test_transform_exercise(make_record):
    ex = WgerExercise.from_api(make_record(
        1, 'Deadlift', category=9, muscles=[8], equipment=[1], description='<p>Lift it</p>'
    ))
    assert transform_exercise(ex) == Exercise(
        name='Soulevé de terre',
        description='<p>Lift it</p>',
        category='strength',
        muscle_group='legs',
        equipment='barbell',
    )


def test_transform_exercises_filters_language_and_keeps_order(records):
    exercises = transform_exercises(records)
    assert [e.name for e in exercises] == ['Développé couché', 'Planche', 'Stretch']
    assert exercises[1].muscle_group == 'full_body'
    assert exercises[1].equipment == 'bodyweight'
    assert exercises[2].category == 'flexibility'
    assert exercises[2].muscle_group == 'full_body'
    assert exercises[2].equipment == 'none'


def test_transform_exercises_other_language(records):
    exercises = transform_exercises(records, language='de')
    assert [e.name for e in exercises] == ['Bankdrücken']


def test_transform_exercises_skips_nameless(make_record):
    exercises = transform_exercises([make_record(1, ''), make_record(2, '  '), make_record(3, 'Crunch')])
    assert [e.name for e in exercises] == ['Crunch']


def test_from_api_accepts_bare_ids():
    ex = WgerExercise.from_api({
        'id': 7,
        'name': 'Push-up',
        'category': 11,
        'muscles': [4],
        'equipment': [4],
        'language': 2,
    })
    assert ex.language == 'en'
    assert ex.category_id == 11
    assert ex.category_name is None
    assert ex.description == ''
    assert transform_exercise(ex).as_row() == {
        'name': 'Pompe',
        'description': '',
        'category': 'strength',
        'muscle_group': 'chest',
        'equipment': 'bodyweight',
    }


def test_from_api_missing_lists():
    ex = WgerExercise.from_api({'id': 1, 'name': 'Dips', 'category': None, 'muscles': None, 'language': {'id': 2}})
    assert ex.muscles == []
    assert ex.equipment == []
    assert ex.language == 'en'


def test_transform_exercises_skips_non_object_records(make_record, caplog):
    exercises = transform_exercises([None, 42, make_record(1, 'Squat')])
    assert [e.name for e in exercises] == ['Squat']
    assert 'Skipping malformed WGER record' in caplog.text
