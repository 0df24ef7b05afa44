def start(client):
    response = client.post('/api/assessment/start')
    assert response.status_code == 201
    return response.get_json()


def complete(client, session_id, max_answers):
    data = None
    for question_id, answer in max_answers.items():
        client.post(f'/api/assessment/{session_id}/answer',
                    json={'question_id': question_id, 'answer': answer})
        data = client.post(f'/api/assessment/{session_id}/next').get_json()
    return data


def test_overview(client):
    data = client.get('/api/assessment/overview').get_json()
    assert data['question_count'] == 12
    assert data['role']['title'] == 'Cyber Law Specialist'
    assert data['sections'][0] == 'Psychometric Evaluation'


def test_list_questions(client):
    data = client.get('/api/questions').get_json()
    assert [q['id'] for q in data['questions']][:2] == ['psych_1', 'psych_2']


def test_start_assessment(client):
    data = start(client)
    assert data['state'] == 'in_progress'
    assert data['current']['question']['id'] == 'psych_1'
    assert data['current']['can_proceed'] is False


def test_next_is_blocked_without_answer(client):
    session_id = start(client)['session_id']
    data = client.post(f'/api/assessment/{session_id}/next').get_json()
    assert data['navigation'] == 'blocked'
    assert data['position'] == 0


def test_answer_and_advance(client):
    session_id = start(client)['session_id']

    response = client.post(f'/api/assessment/{session_id}/answer',
                           json={'question_id': 'psych_1', 'answer': 'structured'})
    assert response.status_code == 200
    assert response.get_json()['current']['answer'] == 'structured'

    data = client.post(f'/api/assessment/{session_id}/next').get_json()
    assert data['navigation'] == 'moved'
    assert data['current']['question']['id'] == 'psych_2'


def test_scale_answer_accepts_integer(client):
    session_id = start(client)['session_id']
    response = client.post(f'/api/assessment/{session_id}/answer',
                           json={'question_id': 'psych_2', 'answer': 4})
    assert response.status_code == 200


def test_invalid_answers_rejected(client):
    session_id = start(client)['session_id']
    url = f'/api/assessment/{session_id}/answer'

    assert client.post(url, json={'question_id': 'psych_2', 'answer': '9'}).status_code == 400
    assert client.post(url, json={'question_id': 'psych_1', 'answer': 'shrug'}).status_code == 400
    assert client.post(url, json={'question_id': 'nope', 'answer': 'x'}).status_code == 400
    assert client.post(url, json={'question_id': 'psych_1'}).status_code == 400
    assert client.post(url, json={'question_id': 'psych_1', 'answer': ['a']}).status_code == 400


def test_previous_from_first_question_exits(client):
    session_id = start(client)['session_id']
    data = client.post(f'/api/assessment/{session_id}/previous').get_json()
    assert data['navigation'] == 'exited'
    assert data['redirect'] == '/'


def test_complete_assessment_and_report(client, max_answers):
    session_id = start(client)['session_id']

    data = complete(client, session_id, max_answers)
    assert data['navigation'] == 'completed'
    assert data['results']['overall_score'] == 100

    response = client.get(f'/api/assessment/{session_id}/results')
    assert response.status_code == 200
    report = response.get_json()['report']
    assert report['results']['recommendation'] == 'Yes'
    assert len(report['career_paths']) == 5
    assert response.get_json()['validation']['valid'] is True


def test_results_before_completion(client):
    session_id = start(client)['session_id']
    response = client.get(f'/api/assessment/{session_id}/results')
    assert response.status_code == 409


def test_answer_after_completion_conflicts(client, max_answers):
    session_id = start(client)['session_id']
    complete(client, session_id, max_answers)

    response = client.post(f'/api/assessment/{session_id}/answer',
                           json={'question_id': 'psych_1', 'answer': 'intuitive'})
    assert response.status_code == 409


def test_restart(client, max_answers):
    session_id = start(client)['session_id']
    complete(client, session_id, max_answers)

    data = client.post(f'/api/assessment/{session_id}/restart').get_json()
    assert data['state'] == 'in_progress'
    assert data['position'] == 0
    assert data['answered_count'] == 0


def test_unknown_session(client):
    assert client.get('/api/assessment/missing').status_code == 404
    assert client.post('/api/assessment/missing/next').status_code == 404


def test_discard_session(client):
    session_id = start(client)['session_id']
    assert client.delete(f'/api/assessment/{session_id}').status_code == 200
    assert client.get(f'/api/assessment/{session_id}').status_code == 404


def test_session_limit(client):
    # TestingConfig allows 5 live sessions
    for _ in range(5):
        start(client)
    assert client.post('/api/assessment/start').status_code == 429


def test_finished_sessions_free_the_limit(client, max_answers):
    # TestingConfig allows 5 in-progress sessions
    for _ in range(5):
        session_id = start(client)['session_id']
        assert complete(client, session_id, max_answers)['navigation'] == 'completed'

    response = client.post('/api/assessment/start')
    assert response.status_code == 201
