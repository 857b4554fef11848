"""Constants for Flutter code generation"""

from enum import Enum


class WidgetKind(str, Enum):
    """Component kinds the widget generator knows how to render.

    ``UNKNOWN`` stands in for any other tag; the raw tag stays on the
    component so the placeholder can name it.
    """

    TEXT = 'text'
    TEXTFIELD = 'textfield'
    TABLE = 'table'
    CHECKBOX = 'checkbox'
    RADIO = 'radio'
    SELECT = 'select'
    CONTAINER = 'container'
    ELEVATED_BUTTON = 'elevatedbutton'
    LISTVIEW = 'listview'
    IMAGE = 'image'
    COLUMN = 'column'
    ROW = 'row'
    STACK = 'stack'
    PADDING = 'padding'
    CENTER = 'center'
    EXPANDED = 'expanded'
    SIZEDBOX = 'sizedbox'
    CIRCLE_AVATAR = 'circleavatar'
    ICON = 'icon'
    SWITCH = 'switch'
    SLIDER = 'slider'
    APPBAR = 'appbar'
    BOTTOM_NAVIGATION_BAR = 'bottomnavigationbar'
    FLOATING_ACTION_BUTTON = 'floatingactionbutton'
    CARD = 'card'
    LISTTILE = 'listtile'
    DRAWER = 'drawer'
    TABBAR = 'tabbar'
    SNACKBAR = 'snackbar'
    UNKNOWN = 'unknown'

    @classmethod
    def from_tag(cls, tag) -> 'WidgetKind':
        """Map a raw ``type`` tag onto a kind (case-insensitive)"""
        if not isinstance(tag, str):
            return cls.UNKNOWN
        normalized = tag.strip().lower()
        normalized = KIND_ALIASES.get(normalized, normalized)
        if normalized == cls.UNKNOWN.value:
            return cls.UNKNOWN
        try:
            return cls(normalized)
        except ValueError:
            return cls.UNKNOWN


KIND_ALIASES = {
    'button': 'elevatedbutton',
}

# Design canvas the whiteboard draws on; generated screens scale against it
REFERENCE_WIDTH = 320
REFERENCE_HEIGHT = 568

HORIZONTAL_SCALE_VAR = 'horizontalScale'
VERTICAL_SCALE_VAR = 'verticalScale'

# Components whose y differs from the row anchor by less than this share a row
ROW_TOLERANCE = 20

MAX_CHILD_DEPTH = 32

INDENT_STEP = 2

TRANSPARENT = 'Colors.transparent'

UNSET = None

# Default properties per kind.
# A value of None means "absent unless the component supplies one".
WIDGET_DEFAULTS = {
    WidgetKind.CONTAINER: {
        'width': 200,
        'height': 150,
        'bgColor': '#e3f2fd',
        'borderRadius': 0,
        'content': '',
    },
    WidgetKind.TEXT: {
        'content': 'Text content',
        'width': 200,
        'height': 50,
        'textColor': '#000000',
        'bgColor': UNSET,
        'fontSizeType': UNSET,
        'fontSize': UNSET,
        'fontSizePx': UNSET,
        'fontWeight': 'normal',
        'textAlign': 'left',
        'textStyle': 'p',
    },
    WidgetKind.ELEVATED_BUTTON: {
        'text': 'Button',
        'width': 150,
        'height': 40,
        'bgColor': '#2196F3',
        'textColor': '#FFFFFF',
    },
    WidgetKind.TEXTFIELD: {
        'label': UNSET,
        'labelText': 'Label',
        'placeholder': 'Enter text...',
        'width': 250,
        'height': 70,
        'bgColor': '#ffffff',
        'textColor': '#000000',
        'labelColor': '#2196F3',
        'labelSize': 12,
    },
    WidgetKind.COLUMN: {
        'items': ['Item 1', 'Item 2', 'Item 3'],
        'width': 200,
        'height': 300,
        'bgColor': UNSET,
    },
    WidgetKind.ROW: {
        'items': ['Item 1', 'Item 2', 'Item 3'],
        'width': 300,
        'height': 100,
        'bgColor': UNSET,
    },
    WidgetKind.STACK: {
        'content': 'Stack',
        'width': 250,
        'height': 250,
        'bgColor': UNSET,
    },
    WidgetKind.PADDING: {
        'content': 'Padded Content',
        'paddingTop': 16,
        'paddingRight': 16,
        'paddingBottom': 16,
        'paddingLeft': 16,
    },
    WidgetKind.CENTER: {
        'content': 'Centered Content',
    },
    WidgetKind.EXPANDED: {
        'content': 'Expanded Content',
    },
    WidgetKind.SIZEDBOX: {
        'width': 100,
        'height': 100,
    },
    WidgetKind.CIRCLE_AVATAR: {
        'initials': 'AB',
        'bgColor': '#2196F3',
        'radius': 40,
    },
    WidgetKind.ICON: {
        'icon': '★',
        'size': 24,
        'color': 'Colors.blue',
    },
    WidgetKind.SWITCH: {
        'isActive': False,
    },
    WidgetKind.CHECKBOX: {
        'mode': 'single',
        'width': 200,
        'height': UNSET,
        'bgColor': UNSET,
        'textColor': '#000000',
        'isChecked': False,
        'label': 'Checkbox',
        'items': [],
    },
    WidgetKind.RADIO: {
        'width': 230,
        'height': 150,
        'textColor': '#000000',
        'backgroundColor': UNSET,
        'label': 'Radio Option',
        'groupLabel': 'Radio Group',
        'showGroupLabel': False,
        'groupLabelFontSize': 16,
        'fontSize': 14,
        'fontWeight': 'normal',
        'padding': 8,
        'borderRadius': 4,
        'borderWidth': 0,
        'borderColor': '#9E9E9E',
        'activeColor': '#2196F3',
        'inactiveColor': '#9E9E9E',
        'isSelected': False,
        'radioItems': [
            {'value': 'option1', 'label': 'Option 1', 'isSelected': True},
            {'value': 'option2', 'label': 'Option 2', 'isSelected': False},
        ],
    },
    WidgetKind.SLIDER: {
        'value': 50,
    },
    WidgetKind.APPBAR: {
        'title': 'App Title',
    },
    WidgetKind.BOTTOM_NAVIGATION_BAR: {
        'items': ['Home', 'Search', 'Profile'],
    },
    WidgetKind.FLOATING_ACTION_BUTTON: {
        'icon': '+',
    },
    WidgetKind.CARD: {
        'title': 'Card Title',
        'content': 'Card content goes here. This is a sample text.',
    },
    WidgetKind.LISTTILE: {
        'title': 'List Tile Title',
        'subtitle': 'Subtitle',
    },
    WidgetKind.DRAWER: {
        'title': 'Drawer',
        'items': ['Item 1', 'Item 2', 'Item 3'],
    },
    WidgetKind.TABBAR: {
        'tabs': ['Tab 1', 'Tab 2', 'Tab 3'],
    },
    WidgetKind.SNACKBAR: {
        'message': 'Snackbar message',
    },
    WidgetKind.LISTVIEW: {
        'items': ['Item 1', 'Item 2', 'Item 3', 'Item 4'],
        'width': 300,
        'height': 200,
        'cardWidth': 150,
        'cardHeight': UNSET,
        'scrollDirection': 'vertical',
        'bgColor': '#ffffff',
        'spacing': 4,
        'title': UNSET,
        'showScrollbar': True,
        'paddingTop': 8,
        'paddingRight': 8,
        'paddingBottom': 8,
        'paddingLeft': 8,
        'marginTop': 0,
        'marginRight': 0,
        'marginBottom': 0,
        'marginLeft': 0,
    },
    WidgetKind.IMAGE: {
        'altText': 'Image',
        'width': 200,
        'height': 150,
        'bgColor': '#F5F5F5',
    },
    WidgetKind.TABLE: {
        'tableTitle': 'Data Table',
        'showTitle': True,
        'headers': ['Header 1', 'Header 2', 'Header 3'],
        'rows': [['Cell 1', 'Cell 2', 'Cell 3'], ['Cell 4', 'Cell 5', 'Cell 6']],
        'width': 500,
        'height': 200,
        'bgColor': '#ffffff',
        'headerBgColor': '#f5f5f5',
        'textColor': '#000000',
    },
    WidgetKind.SELECT: {
        'label': 'Select',
        'placeholder': 'Select an option',
        'options': ['Option 1', 'Option 2', 'Option 3'],
        'width': 250,
        'height': 70,
        'bgColor': '#ffffff',
        'textColor': '#000000',
    },
    WidgetKind.UNKNOWN: {},
}

CHECKBOX_MULTIPLE_HEIGHT = 200
CHECKBOX_SINGLE_HEIGHT = 50

# Text sizes offered by the canvas font-size picker
FONT_SIZE_PRESETS = {
    'small': 12.0,
    'medium': 16.0,
    'large': 20.0,
    'xlarge': 24.0,
}

DEFAULT_FONT_SIZE = 16.0

HEADING_TEXT_STYLES = ('h1', 'h2', 'h3')

TEXT_ALIGNMENTS = {
    'left': 'TextAlign.left',
    'center': 'TextAlign.center',
    'right': 'TextAlign.right',
    'justify': 'TextAlign.justify',
}

FONT_WEIGHTS = {
    'normal': 'FontWeight.normal',
    'bold': 'FontWeight.bold',
    'w100': 'FontWeight.w100',
    'w200': 'FontWeight.w200',
    'w300': 'FontWeight.w300',
    'w400': 'FontWeight.w400',
    'w500': 'FontWeight.w500',
    'w600': 'FontWeight.w600',
    'w700': 'FontWeight.w700',
    'w800': 'FontWeight.w800',
    'w900': 'FontWeight.w900',
}

# Glyphs offered by the canvas icon picker
ICON_GLYPHS = {
    '★': 'Icons.star',
    '♥': 'Icons.favorite',
    '✓': 'Icons.check',
    '✉': 'Icons.email',
    '\U0001F4F1': 'Icons.phone',
    '\U0001F50D': 'Icons.search',
    '⚙': 'Icons.settings',
    '+': 'Icons.add',
    '×': 'Icons.close',
    '⟲': 'Icons.refresh',
    '↑': 'Icons.arrow_upward',
    '↓': 'Icons.arrow_downward',
    '←': 'Icons.arrow_back',
    '→': 'Icons.arrow_forward',
    '⋮': 'Icons.more_vert',
    '≡': 'Icons.menu',
}

# Material icon names accepted verbatim
ICON_NAMES = {
    'star', 'favorite', 'favorite_border', 'check', 'email', 'phone',
    'search', 'settings', 'add', 'close', 'refresh', 'arrow_upward',
    'arrow_downward', 'arrow_back', 'arrow_forward', 'arrow_forward_ios',
    'more_vert', 'menu', 'home', 'person', 'shopping_cart', 'edit',
    'delete', 'share', 'notifications', 'help', 'info', 'location_on',
    'remove', 'camera_alt', 'lock', 'visibility',
}

DEFAULT_ICON = 'Icons.star'

# Leading icons for positional navigation entries
BOTTOM_NAV_ICONS = ('Icons.home', 'Icons.search', 'Icons.person')
DRAWER_ITEM_ICONS = ('Icons.home', 'Icons.settings', 'Icons.info')

LEGACY_SCREEN_NAME = 'HomeScreen'
LEGACY_SCREEN_FILE = 'home_screen'
LEGACY_APP_BAR_TITLE = 'Flutter App'

# Flutter and Dart types referenced by the generated files. A screen class
# with one of these names would shadow the type it instantiates.
FLUTTER_CLASS_NAMES = frozenset([
    'Alignment', 'AppBar', 'Axis', 'Border', 'BorderRadius', 'BorderStyle',
    'BottomNavigationBar', 'BottomNavigationBarItem', 'BouncingScrollPhysics',
    'BoxConstraints', 'BoxDecoration', 'BuildContext', 'Card', 'Center',
    'Checkbox', 'CircleAvatar', 'Clip', 'Color', 'Colors', 'Column',
    'Container', 'CrossAxisAlignment', 'DataCell', 'DataColumn', 'DataRow',
    'DataTable', 'DefaultTabController', 'Drawer', 'DrawerHeader',
    'DropdownButtonFormField', 'DropdownMenuItem', 'EdgeInsets',
    'ElevatedButton', 'Expanded', 'FloatingActionButton', 'FontStyle',
    'FontWeight', 'Icon', 'IconButton', 'Icons', 'InputBorder',
    'InputDecoration', 'LayoutBuilder', 'ListTile', 'ListView',
    'MainAxisAlignment', 'MainAxisSize', 'MaterialApp', 'MaterialState',
    'MaterialStateProperty', 'MaterialTapTargetSize', 'MediaQuery',
    'Navigator', 'OutlineInputBorder', 'Padding', 'Positioned', 'Radio',
    'Radius', 'RoundedRectangleBorder', 'Row', 'Scaffold',
    'ScaffoldMessenger', 'ScrollController', 'Scrollbar',
    'SingleChildScrollView', 'SizedBox', 'Slider', 'SnackBar',
    'SnackBarAction', 'Stack', 'StatelessWidget', 'Switch', 'Tab', 'TabBar',
    'TabBarView', 'Text', 'TextAlign', 'TextField', 'TextOverflow',
    'TextStyle', 'ThemeData', 'VisualDensity', 'Widget',
    # dart:core
    'Object', 'String', 'Set', 'List', 'Map', 'Function', 'Type', 'Null',
])
