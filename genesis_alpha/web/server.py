"""Web front end for collaboratively forming a genesis file."""

import logging
import re
from typing import Optional

from flask import Flask, Response, abort, jsonify, redirect, render_template, request, url_for

from ..config import ServiceConfig
from ..models import CHAIN_ID_PATTERN
from ..registry import (
    ConflictError,
    GenesisError,
    GenesisRegistry,
    NotFoundError,
    SerializationError,
    ValidationError,
    build_validator,
    require_validator,
)
from .templates import loader

logger = logging.getLogger(__name__)

_chain_id_re = re.compile(CHAIN_ID_PATTERN)


class GenesisService:
    """
    Genesis Alpha web service.

    One party creates a genesis document and passes the add-validator link
    around; everybody else adds their validator, then downloads the result.
    All state lives in the injected registry.
    """

    def __init__(self, registry: GenesisRegistry, config: Optional[ServiceConfig] = None):
        """
        Initialize the web service.

        Args:
            registry: Registry holding the genesis documents
            config: Service configuration (defaults if None)
        """
        self.registry = registry
        self.config = config or ServiceConfig()
        self.app = Flask(__name__)
        self.app.jinja_loader = loader
        self._setup_error_handlers()
        self._setup_routes()

    def _setup_error_handlers(self):
        """Map registry errors to HTTP responses."""

        def plain(message: str, status: int) -> Response:
            return Response(message, status=status, mimetype="text/plain")

        @self.app.errorhandler(ValidationError)
        @self.app.errorhandler(ConflictError)
        def not_acceptable(e: GenesisError):
            logger.warning(f"Rejected {request.path}: {e}")
            return plain(str(e), 406)

        @self.app.errorhandler(NotFoundError)
        def not_found(e: NotFoundError):
            return plain(str(e), 404)

        @self.app.errorhandler(SerializationError)
        def serialization_failed(e: SerializationError):
            logger.error(str(e))
            return plain(str(e), 500)

    def _setup_routes(self):
        """Set up Flask routes."""

        @self.app.route('/', methods=['GET'])
        def index():
            """List all genesis files."""
            return render_template("list.html", chain_ids=sorted(self.registry.list()))

        @self.app.route('/new', methods=['GET'])
        def new():
            """Form for a new genesis file."""
            return render_template("new.html")

        @self.app.route('/create', methods=['POST'])
        def create():
            """Create a genesis file, optionally with the creator's validator."""
            chain_id = request.form.get('chainID', '')
            # chain ID problems are reported before validator problems
            self.registry.check_chain_id(chain_id)
            if chain_id in self.registry:
                raise ConflictError("chain already exists")

            validator = build_validator(*self._validator_fields())
            genesis = self.registry.create(
                chain_id,
                validator=validator,
                app_hash=self._app_hash(),
                app_state=request.form.get('app_state') or None
            )
            return render_template("created.html", chain_id=genesis.chain_id)

        @self.app.route('/new_validator/<chain_id>', methods=['GET'])
        def new_validator(chain_id: str):
            """Form for adding a validator."""
            genesis = self.registry.get(self._path_chain_id(chain_id))
            return render_template(
                "new_validator.html",
                chain_id=chain_id,
                validator_count=len(genesis.validators)
            )

        @self.app.route('/add_validator/<chain_id>', methods=['POST'])
        def add_validator(chain_id: str):
            """Add a validator, then show the resulting genesis file."""
            chain_id = self._path_chain_id(chain_id)
            # report a missing chain before bad input
            self.registry.get(chain_id)
            validator = require_validator(*self._validator_fields())
            self.registry.add_validator(chain_id, validator)
            return redirect(url_for('view', chain_id=chain_id))

        @self.app.route('/view/<chain_id>', methods=['GET'])
        def view(chain_id: str):
            """Genesis file as JSON."""
            return self._genesis_response(chain_id)

        @self.app.route('/download/<chain_id>', methods=['GET'])
        def download(chain_id: str):
            """Genesis file as a JSON attachment."""
            response = self._genesis_response(chain_id)
            response.headers['Content-Disposition'] = 'attachment; filename=genesis.json'
            return response

        @self.app.route('/health', methods=['GET'])
        def health():
            """Health check endpoint."""
            return jsonify({
                "status": "healthy",
                "chains": len(self.registry)
            })

    @staticmethod
    def _path_chain_id(chain_id: str) -> str:
        if not _chain_id_re.fullmatch(chain_id):
            abort(404)
        return chain_id

    @staticmethod
    def _validator_fields() -> tuple[str, str, str]:
        return (
            request.form.get('validator_pubkey', ''),
            request.form.get('validator_power', ''),
            request.form.get('validator_name', ''),
        )

    @staticmethod
    def _app_hash() -> bytes:
        raw = request.form.get('app_hash', '')
        try:
            return bytes.fromhex(raw)
        except ValueError as e:
            raise ValidationError(f"app_hash must be hex-encoded: {e}") from e

    def _genesis_response(self, chain_id: str) -> Response:
        genesis = self.registry.get(self._path_chain_id(chain_id))
        body = self.registry.serialize(genesis)
        return Response(body, status=200, mimetype='application/json')

    def run(self, **kwargs):
        """
        Run the web service.

        Args:
            **kwargs: Additional arguments for Flask app.run()
        """
        logger.info(f"Starting Genesis Alpha on {self.config.host}:{self.config.port}")
        self.app.run(
            host=self.config.host,
            port=self.config.port,
            debug=self.config.debug,
            threaded=True,
            **kwargs
        )


def create_app(config: Optional[ServiceConfig] = None) -> Flask:
    """Build a Flask app backed by a fresh, empty registry."""
    config = config or ServiceConfig()
    registry = GenesisRegistry(allow_duplicate_pub_keys=config.allow_duplicate_pub_keys)
    return GenesisService(registry, config).app
