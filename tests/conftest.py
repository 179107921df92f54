import pytest
import psycopg2


def wger_record(id, name, category=8, muscles=(), equipment=(), language='en', description=''):
    return {
        'id': id,
        'name': name,
        'description': description,
        'category': {'id': category, 'name': 'Arms'},
        'muscles': [{'id': m, 'name': f'muscle-{m}', 'is_front': True} for m in muscles],
        'equipment': [{'id': e, 'name': f'equipment-{e}'} for e in equipment],
        'language': {'id': 2 if language == 'en' else 1, 'short_name': language},
    }


class FakeCursor:
    def __init__(self, db):
        self.db = db
        self._row = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        self.db.statements.append((' '.join(sql.split()), params))
        statement = sql.strip().split()[0].upper()

        if statement == 'SELECT':
            name = params[0]
            self._row = (self.db.rows[name]['id'],) if name in self.db.rows else None
            return
        if statement not in ('INSERT', 'UPDATE'):
            return

        name = params['name']
        if name in self.db.fail_names:
            raise psycopg2.OperationalError(f"cannot write {name}")

        if statement == 'INSERT':
            self.db.pending.append(('insert', dict(params)))
        elif statement == 'UPDATE':
            self.db.pending.append(('update', dict(params)))

    def fetchone(self):
        return self._row


class FakeConnection:
    """In-memory stand-in for a psycopg2 connection to the exercises table."""

    def __init__(self, rows=None, fail_names=()):
        self.rows = {}
        self.next_id = 1
        for name in rows or ():
            self.rows[name] = {'id': self.next_id, 'name': name}
            self.next_id += 1
        self.fail_names = set(fail_names)
        self.statements = []
        self.pending = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        for kind, params in self.pending:
            if kind == 'insert':
                self.rows[params['name']] = dict(params, id=self.next_id)
                self.next_id += 1
            else:
                old = next(n for n, r in self.rows.items() if r['id'] == params['id'])
                del self.rows[old]
                self.rows[params['name']] = dict(params)
        self.pending = []
        self.commits += 1

    def rollback(self):
        self.pending = []
        self.rollbacks += 1

    def close(self):
        self.closed = True


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=''):
        self._payload = payload
        self.status_code = status_code
        self.text = text

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


@pytest.fixture
def records():
    return [
        wger_record(1, 'Bench Press', category=11, muscles=[4, 2], equipment=[1]),
        wger_record(2, 'Bankdrücken', category=11, muscles=[4], equipment=[1], language='de'),
        wger_record(3, 'Plank', category=10, muscles=[], equipment=[]),
        wger_record(4, 'Stretch', category=15, muscles=[99], equipment=[42]),
    ]


@pytest.fixture
def fake_api(monkeypatch):
    """Patch requests.get to answer with a page of records; returns call log."""
    calls = []

    def install(payload=None, status_code=200, text='', exc=None):
        def fake_get(url, params=None, headers=None, timeout=None):
            calls.append({'url': url, 'params': params, 'timeout': timeout})
            if exc is not None:
                raise exc
            return FakeResponse(payload, status_code=status_code, text=text)

        monkeypatch.setattr('wger_sync.wger_api.requests.get', fake_get)
        return calls

    return install


@pytest.fixture
def make_record():
    return wger_record
