"""Infrastructure modules for the response renderer.

Centralized infrastructure components:
- configuration: Settings management (settings, RendererSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Translation dictionary, placeholder substitution, language resolution
- rendering: Context resolution, content negotiation, response middleware
- services: Dependency injection services (get_settings, get_dictionary)
"""
