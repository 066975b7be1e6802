"""Block Kit モデル"""

from chat_kit.blockkit.blocks import (
    ActionsBlock,
    Block,
    ContextBlock,
    ContextElement,
    DividerBlock,
    FileBlock,
    HeaderBlock,
    ImageBlock,
    InputBlock,
    SectionBlock,
    actions_block,
    context_block,
    divider_block,
    fields_section,
    file_block,
    header_block,
    image_block,
    input_block,
    markdown_section,
    plain_text_section,
)
from chat_kit.blockkit.composition import (
    ConfirmationDialog,
    DispatchActionConfiguration,
    FilterForConversationList,
    MarkdownText,
    Option,
    OptionGroup,
    PlainText,
    Text,
    confirmation_dialog,
    dispatch_action_configuration,
    filter_for_conversation_list,
    markdown,
    markdown_option,
    option_group,
    plain_text,
    plain_text_option,
)
from chat_kit.blockkit.elements import (
    BlockElement,
    Button,
    ChannelsSelect,
    CheckboxGroup,
    ConversationsSelect,
    DatePicker,
    ExternalSelect,
    ImageElement,
    InteractiveElement,
    MultiChannelsSelect,
    MultiConversationsSelect,
    MultiExternalSelect,
    MultiSelectMenu,
    MultiStaticSelect,
    MultiUsersSelect,
    OverflowMenu,
    PlainTextInput,
    RadioButtonGroup,
    SelectMenu,
    StaticSelect,
    TimePicker,
    UsersSelect,
    button,
    checkbox_group,
    date_picker,
    image_element,
    overflow_menu,
    plain_text_input,
    radio_button_group,
    time_picker,
)

__all__ = [
    "ActionsBlock",
    "Block",
    "BlockElement",
    "Button",
    "ChannelsSelect",
    "CheckboxGroup",
    "ConfirmationDialog",
    "ContextBlock",
    "ContextElement",
    "ConversationsSelect",
    "DatePicker",
    "DispatchActionConfiguration",
    "DividerBlock",
    "ExternalSelect",
    "FileBlock",
    "FilterForConversationList",
    "HeaderBlock",
    "ImageBlock",
    "ImageElement",
    "InputBlock",
    "InteractiveElement",
    "MarkdownText",
    "MultiChannelsSelect",
    "MultiConversationsSelect",
    "MultiExternalSelect",
    "MultiSelectMenu",
    "MultiStaticSelect",
    "MultiUsersSelect",
    "Option",
    "OptionGroup",
    "OverflowMenu",
    "PlainText",
    "PlainTextInput",
    "RadioButtonGroup",
    "SectionBlock",
    "SelectMenu",
    "StaticSelect",
    "Text",
    "TimePicker",
    "UsersSelect",
    "actions_block",
    "button",
    "checkbox_group",
    "confirmation_dialog",
    "context_block",
    "date_picker",
    "dispatch_action_configuration",
    "divider_block",
    "fields_section",
    "file_block",
    "filter_for_conversation_list",
    "header_block",
    "image_block",
    "image_element",
    "input_block",
    "markdown",
    "markdown_option",
    "markdown_section",
    "option_group",
    "overflow_menu",
    "plain_text",
    "plain_text_input",
    "plain_text_option",
    "plain_text_section",
    "radio_button_group",
    "time_picker",
]
