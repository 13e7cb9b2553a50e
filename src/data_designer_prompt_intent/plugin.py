from data_designer.plugins.plugin import Plugin, PluginType

prompt_intent_plugin = Plugin(
    config_qualified_name="data_designer_prompt_intent.config.PromptIntentColumnConfig",
    impl_qualified_name="data_designer_prompt_intent.generator.PromptIntentColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)

prompt_template_plugin = Plugin(
    config_qualified_name="data_designer_prompt_intent.config.PromptTemplateColumnConfig",
    impl_qualified_name="data_designer_prompt_intent.generator.PromptTemplateColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
