import logging

logger = logging.getLogger(__name__)


def register_blueprints(app):
    """Register all blueprints with the Flask app."""

    successful_registrations = []

    def register(import_path, description, url_prefix=None):
        module_path, bp_name = import_path.rsplit('.', 1)
        module = __import__(module_path, fromlist=[bp_name])
        blueprint = getattr(module, bp_name)
        if url_prefix:
            app.register_blueprint(blueprint, url_prefix=url_prefix)
        else:
            app.register_blueprint(blueprint)
        successful_registrations.append(description)

    # Public pages, all mounted at the site root
    register('allwayscalc.blueprints.core.core_bp', 'Core')
    register('allwayscalc.blueprints.calculators.calculators_bp', 'Calculators')
    register('allwayscalc.blueprints.converters.converters_bp', 'Converters')
    register('allwayscalc.blueprints.legal.legal_bp', 'Legal & Info')

    # JSON API
    register('allwayscalc.blueprints.api.public.public_api_bp', 'Public API', '/api')

    logger.debug("Registered blueprints: %s", ", ".join(successful_registrations))
    return successful_registrations
