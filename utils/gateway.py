"""
Gateway Module - Query surface of the hosted tabular store

Two backends expose the same select/filter/order/limit and insert chain:

- RestGateway: PostgREST-style HTTP API spoken with requests
- SqlGateway: the local Flask-SQLAlchemy models (development and tests)

Every failure is raised as GatewayError with a descriptive message.
"""

import requests
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from models import TABLE_MODELS, record_to_dict


class GatewayError(Exception):
    """Transport or store failure reported by a gateway backend"""


class Query:
    """Chainable query against one table, run with execute()"""

    def __init__(self, gateway, table):
        self.gateway = gateway
        self.table = table
        self.columns = '*'
        self.filters = []
        self.ordering = []
        self.row_limit = None
        self.records = None

    def select(self, columns='*'):
        self.columns = columns
        return self

    def eq(self, field, value):
        self.filters.append((field, value))
        return self

    def order(self, field, ascending=True):
        self.ordering.append((field, ascending))
        return self

    def limit(self, count):
        self.row_limit = count
        return self

    def insert(self, records):
        self.records = list(records)
        return self

    def execute(self):
        """Run the query; returns a list of wire-shaped dicts"""
        return self.gateway.execute(self)


class Gateway:
    """Base class for gateway backends"""

    name = 'base'

    def table(self, name):
        return Query(self, name)

    def execute(self, query):
        raise NotImplementedError


class RestGateway(Gateway):
    """PostgREST-style HTTP backend (e.g. a hosted Supabase project)"""

    name = 'rest'

    def __init__(self, url, api_key, timeout=None, session=None):
        if not url or not api_key:
            raise ValueError('RestGateway requires a base URL and an API key')
        self.base_url = url.rstrip('/') + '/rest/v1'
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'apikey': api_key,
            'Authorization': f'Bearer {api_key}',
            'Accept': 'application/json',
        })

    def build_params(self, query):
        """Translate a query chain into PostgREST query-string parameters"""
        params = [('select', query.columns)]
        for field, value in query.filters:
            params.append((field, f'eq.{_format_value(value)}'))
        if query.ordering:
            params.append(('order', ','.join(
                f"{field}.{'asc' if ascending else 'desc'}"
                for field, ascending in query.ordering
            )))
        if query.row_limit is not None:
            params.append(('limit', str(query.row_limit)))
        return params

    def execute(self, query):
        url = f'{self.base_url}/{query.table}'
        try:
            if query.records is not None:
                response = self.session.post(
                    url,
                    json=query.records,
                    headers={'Prefer': 'return=representation'},
                    timeout=self.timeout,
                )
            else:
                response = self.session.get(url, params=self.build_params(query), timeout=self.timeout)
        except requests.RequestException as e:
            raise GatewayError(f"Could not reach data store: {str(e)}") from e

        if not response.ok:
            raise GatewayError(f"Data store error ({response.status_code}): {_error_message(response)}")

        if not response.content:
            return []
        try:
            return response.json()
        except ValueError as e:
            raise GatewayError(f"Data store returned invalid JSON: {str(e)}") from e


class SqlGateway(Gateway):
    """Same query surface over the Flask-SQLAlchemy models"""

    name = 'sql'

    def execute(self, query):
        model = TABLE_MODELS.get(query.table)
        if model is None:
            raise GatewayError(f"Unknown table: {query.table}")
        columns = model.__table__.columns

        if query.records is not None:
            return self._insert(model, columns, query.records)

        try:
            statement = model.query
            for field, value in query.filters:
                statement = statement.filter(_column(columns, field) == value)
            for field, ascending in query.ordering:
                column = _column(columns, field)
                statement = statement.order_by(column.asc() if ascending else column.desc())
            if query.row_limit is not None:
                statement = statement.limit(query.row_limit)
            rows = [record_to_dict(r) for r in statement.all()]
        except SQLAlchemyError as e:
            db.session.rollback()
            raise GatewayError(f"Database error: {str(e)}") from e

        if query.columns != '*':
            wanted = [c.strip() for c in query.columns.split(',')]
            for name in wanted:
                _column(columns, name)
            rows = [{name: row[name] for name in wanted} for row in rows]
        return rows

    def _insert(self, model, columns, records):
        rows = []
        for record in records:
            for field in record:
                _column(columns, field)
            rows.append(model(**record))
        try:
            db.session.add_all(rows)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise GatewayError(f"Database error: {str(e)}") from e
        current_app.logger.info(f"Inserted {len(rows)} row(s) into {model.__tablename__}")
        return [record_to_dict(r) for r in rows]


def _column(columns, name):
    if name not in columns:
        raise GatewayError(f"Unknown column: {name}")
    return columns[name]


def _format_value(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if value is None:
        return 'null'
    return str(value)


def _error_message(response):
    try:
        payload = response.json()
    except ValueError:
        return response.text[:200] or response.reason
    if isinstance(payload, dict):
        return payload.get('message') or payload.get('error') or str(payload)
    return str(payload)


def create_gateway(config):
    """Build the gateway backend selected by GATEWAY_BACKEND"""
    backend = config.get('GATEWAY_BACKEND', 'sql')
    if backend == 'rest':
        return RestGateway(
            config.get('SUPABASE_URL'),
            config.get('SUPABASE_ANON_KEY'),
            timeout=config.get('GATEWAY_TIMEOUT'),
        )
    if backend == 'sql':
        return SqlGateway()
    raise ValueError(f"Unknown GATEWAY_BACKEND: {backend}")


__all__ = [
    'GatewayError',
    'Query',
    'Gateway',
    'RestGateway',
    'SqlGateway',
    'create_gateway',
]
