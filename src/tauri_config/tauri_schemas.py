"""
Runtime validators for tauri-config.

Generated from https://raw.githubusercontent.com/tauri-apps/tauri/dev/core/tauri-config-schema/schema.json.
Do not edit by hand; regenerate with ``tauri-config extract``.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
)


class _ClosedModel(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
        use_attribute_docstrings=True,
    )


class _OpenModel(_ClosedModel):
    model_config = ConfigDict(extra="allow")


class PackageConfig(_ClosedModel):
    """The package configuration.

    See more: <https://tauri.app/v1/api/config#packageconfig>
    """

    product_name: Optional[StrictStr] = Field(default=None, alias="productName")
    """App name."""
    version: Optional[StrictStr] = None
    """App version. It is a semver version number or a path to a `package.json` file containing the `version` field. If removed the version number from `Cargo.toml` is used."""


class PatternKindBrownfield(_OpenModel):
    """Brownfield pattern."""

    use: Literal["brownfield"]


class PatternKindIsolationOptions(_OpenModel):
    dir: StrictStr
    """The dir containing the index.html file that contains the secure isolation application."""


class PatternKindIsolation(_OpenModel):
    """Isolation pattern. Recommended for security purposes."""

    use: Literal["isolation"]
    options: PatternKindIsolationOptions


# The application pattern.
PatternKind = Annotated[
    Union[PatternKindBrownfield, PatternKindIsolation], Field(discriminator="use")
]


# An URL to open on a Tauri webview window.
WindowUrl = StrictStr


# System theme.
Theme = Literal["Light", "Dark"]


# How the window title bar should be displayed on macOS.
TitleBarStyle = Literal["Visible", "Transparent", "Overlay"]


# Platform-specific window effects
WindowEffect = Literal[
    "appearanceBased",
    "light",
    "dark",
    "mediumLight",
    "ultraDark",
    "titlebar",
    "selection",
    "menu",
    "popover",
    "sidebar",
    "headerView",
    "sheet",
    "windowBackground",
    "hudWindow",
    "fullScreenUI",
    "tooltip",
    "contentBackground",
    "underWindowBackground",
    "underPageBackground",
    "mica",
    "micaDark",
    "micaLight",
    "tabbed",
    "tabbedDark",
    "tabbedLight",
    "blur",
    "acrylic",
]


# Window effect state **macOS only**
#
# <https://developer.apple.com/documentation/appkit/nsvisualeffectview/state>
WindowEffectState = Literal["followsWindowActiveState", "active", "inactive"]


# a tuple struct of RGBA colors. Each value has minimum of 0 and maximum of 255.
Color = Tuple[
    Annotated[StrictInt, Field(ge=0, le=255)],
    Annotated[StrictInt, Field(ge=0, le=255)],
    Annotated[StrictInt, Field(ge=0, le=255)],
    Annotated[StrictInt, Field(ge=0, le=255)],
]


class WindowEffectsConfig(_ClosedModel):
    """The window effects configuration object"""

    effects: List[WindowEffect]
    """List of Window effects to apply to the Window. Conflicting effects will apply the first one and ignore the rest."""
    state: Optional[WindowEffectState] = None
    """Window effect state **macOS Only**"""
    radius: Optional[StrictFloat] = None
    """Window effect corner radius **macOS Only**"""
    color: Optional[Color] = None
    """Window effect color. Affects [`WindowEffect::Blur`] and [`WindowEffect::Acrylic`] only on Windows 10 v1903+. Doesn't have any effect on Windows 7 or Windows 11."""


class WindowConfig(_ClosedModel):
    """The window configuration object.

    See more: <https://tauri.app/v1/api/config#windowconfig>
    """

    label: StrictStr = None
    """The window identifier. It must be alphanumeric."""
    url: WindowUrl = None
    """The window webview URL."""
    user_agent: Optional[StrictStr] = Field(default=None, alias="userAgent")
    """The user agent for the webview"""
    file_drop_enabled: StrictBool = Field(default=None, alias="fileDropEnabled")
    """Whether the file drop is enabled or not on the webview. By default it is enabled.

    Disabling it is required to use drag and drop on the frontend on Windows.
    """
    center: StrictBool = None
    """Whether or not the window starts centered or not."""
    x: Optional[StrictFloat] = None
    """The horizontal position of the window's top left corner"""
    y: Optional[StrictFloat] = None
    """The vertical position of the window's top left corner"""
    width: StrictFloat = None
    """The window width."""
    height: StrictFloat = None
    """The window height."""
    min_width: Optional[StrictFloat] = Field(default=None, alias="minWidth")
    """The min window width."""
    min_height: Optional[StrictFloat] = Field(default=None, alias="minHeight")
    """The min window height."""
    max_width: Optional[StrictFloat] = Field(default=None, alias="maxWidth")
    """The max window width."""
    max_height: Optional[StrictFloat] = Field(default=None, alias="maxHeight")
    """The max window height."""
    resizable: StrictBool = None
    """Whether the window is resizable or not. When resizable is set to false, native window's maximize button is automatically disabled."""
    maximizable: StrictBool = None
    """Whether the window's native maximize button is enabled or not. If resizable is set to false, this setting is ignored.

    ## Platform-specific

    - **macOS:** Disables the "zoom" button in the window titlebar, which is also used to enter fullscreen mode. - **Linux / iOS / Android:** Unsupported.
    """
    minimizable: StrictBool = None
    """Whether the window's native minimize button is enabled or not.

    ## Platform-specific

    - **Linux / iOS / Android:** Unsupported.
    """
    closable: StrictBool = None
    """Whether the window's native close button is enabled or not.

    ## Platform-specific

    - **Linux:** "GTK+ will do its best to convince the window manager not to show a close button. Depending on the system, this function may not have any effect when called on a window that is already visible" - **iOS / Android:** Unsupported.
    """
    title: StrictStr = None
    """The window title."""
    fullscreen: StrictBool = None
    """Whether the window starts as fullscreen or not."""
    focus: StrictBool = None
    """Whether the window will be initially focused or not."""
    transparent: StrictBool = None
    """Whether the window is transparent or not.

    Note that on `macOS` this requires the `macos-private-api` feature flag, enabled under `tauri > macOSPrivateApi`. WARNING: Using private APIs on `macOS` prevents your application from being accepted to the `App Store`.
    """
    maximized: StrictBool = None
    """Whether the window is maximized or not."""
    visible: StrictBool = None
    """Whether the window is visible or not."""
    decorations: StrictBool = None
    """Whether the window should have borders and bars."""
    always_on_bottom: StrictBool = Field(default=None, alias="alwaysOnBottom")
    """Whether the window should always be below other windows."""
    always_on_top: StrictBool = Field(default=None, alias="alwaysOnTop")
    """Whether the window should always be on top of other windows."""
    visible_on_all_workspaces: StrictBool = Field(
        default=None, alias="visibleOnAllWorkspaces"
    )
    """Whether the window should be visible on all workspaces or virtual desktops."""
    content_protected: StrictBool = Field(default=None, alias="contentProtected")
    """Prevents the window contents from being captured by other apps."""
    skip_taskbar: StrictBool = Field(default=None, alias="skipTaskbar")
    """If `true`, hides the window icon from the taskbar on Windows and Linux."""
    theme: Optional[Theme] = None
    """The initial window theme. Defaults to the system theme. Only implemented on Windows and macOS 10.14+."""
    title_bar_style: TitleBarStyle = Field(default=None, alias="titleBarStyle")
    """The style of the macOS title bar."""
    hidden_title: StrictBool = Field(default=None, alias="hiddenTitle")
    """If `true`, sets the window title to be hidden on macOS."""
    accept_first_mouse: StrictBool = Field(default=None, alias="acceptFirstMouse")
    """Whether clicking an inactive window also clicks through to the webview on macOS."""
    tabbing_identifier: Optional[StrictStr] = Field(
        default=None, alias="tabbingIdentifier"
    )
    """Defines the window [tabbing identifier] for macOS.

    Windows with matching tabbing identifiers will be grouped together. If the tabbing identifier is not set, automatic tabbing will be disabled.

    [tabbing identifier]: <https://developer.apple.com/documentation/appkit/nswindow/1644704-tabbingidentifier>
    """
    additional_browser_args: Optional[StrictStr] = Field(
        default=None, alias="additionalBrowserArgs"
    )
    """Defines additional browser arguments on Windows. By default wry passes `--disable-features=msWebOOUI,msPdfOOUI,msSmartScreenProtection` so if you use this method, you also need to disable these components by yourself if you want."""
    shadow: StrictBool = None
    """Whether or not the window has shadow.

    ## Platform-specific

    - **Windows:** - `false` has no effect on decorated window, shadow are always ON. - `true` will make ndecorated window have a 1px white border, and on Windows 11, it will have a rounded corners. - **Linux:** Unsupported.
    """
    window_effects: Optional[WindowEffectsConfig] = Field(
        default=None, alias="windowEffects"
    )
    """Window effects.

    Requires the window to be transparent.

    ## Platform-specific:

    - **Windows**: If using decorations or shadows, you may want to try this workaround <https://github.com/tauri-apps/tao/issues/72#issuecomment-975607891> - **Linux**: Unsupported
    """
    incognito: StrictBool = None
    """Whether or not the webview should be launched in incognito  mode.

    ## Platform-specific:

    - **Android**: Unsupported.
    """


# A bundle referenced by tauri-bundler.
BundleType = Literal["deb", "appimage", "msi", "nsis", "app", "dmg", "updater"]


# Targets to bundle. Each value is case insensitive.
BundleTarget = Union[Literal["all"], List[BundleType], BundleType]


# Definition for bundle resources. Can be either a list of paths to include or a map
# of source to target paths.
BundleResources = Union[List[StrictStr], Dict[str, StrictStr]]


# An extension for a [`FileAssociation`].
#
# A leading `.` is automatically stripped.
AssociationExt = StrictStr


# macOS-only. Corresponds to CFBundleTypeRole
BundleTypeRole = Literal["Editor", "Viewer", "Shell", "QLGenerator", "None"]


class FileAssociation(_ClosedModel):
    """File association"""

    ext: List[AssociationExt]
    """File extensions to associate with this app. e.g. 'png'"""
    name: Optional[StrictStr] = None
    """The name. Maps to `CFBundleTypeName` on macOS. Default to `ext[0]`"""
    description: Optional[StrictStr] = None
    """The association description. Windows-only. It is displayed on the `Type` column on Windows Explorer."""
    role: BundleTypeRole
    """The app’s role with respect to the type. Maps to `CFBundleTypeRole` on macOS."""
    mime_type: Optional[StrictStr] = Field(default=None, alias="mimeType")
    """The mime-type e.g. 'image/png' or 'text/plain'. Linux-only."""


class AppImageConfig(_ClosedModel):
    """Configuration for AppImage bundles.

    See more: <https://tauri.app/v1/api/config#appimageconfig>
    """

    bundle_media_framework: StrictBool = Field(
        default=None, alias="bundleMediaFramework"
    )
    """Include additional gstreamer dependencies needed for audio and video playback. This increases the bundle size by ~15-35MB depending on your build system."""


class DebConfig(_ClosedModel):
    """Configuration for Debian (.deb) bundles.

    See more: <https://tauri.app/v1/api/config#debconfig>
    """

    depends: Optional[List[StrictStr]] = None
    """The list of deb dependencies your application relies on."""
    files: Dict[str, StrictStr] = None
    """The files to include on the package."""
    desktop_template: Optional[StrictStr] = Field(default=None, alias="desktopTemplate")
    """Path to a custom desktop file Handlebars template.

    Available variables: `categories`, `comment` (optional), `exec`, `icon` and `name`.
    """


class Position(_ClosedModel):
    """Position coordinates struct."""

    x: StrictFloat
    """X coordinate."""
    y: StrictFloat
    """Y coordinate."""


class Size(_ClosedModel):
    """Size of the window."""

    width: StrictFloat
    """Width of the window."""
    height: StrictFloat
    """Height of the window."""


class DmgConfig(_ClosedModel):
    """Configuration for Apple Disk Image (.dmg) bundles.

    See more: https://tauri.app/v1/api/config#dmgconfig
    """

    background: Optional[StrictStr] = None
    """Image to use as the background in dmg file. Accepted formats: `png`/`jpg`/`gif`."""
    window_position: Optional[Position] = Field(default=None, alias="windowPosition")
    """Position of volume window on screen."""
    window_size: Size = Field(default=None, alias="windowSize")
    """Size of volume window."""
    app_position: Position = Field(default=None, alias="appPosition")
    """Position of app file on window."""
    application_folder_position: Position = Field(
        default=None, alias="applicationFolderPosition"
    )
    """Position of application folder on window."""


class MacConfig(_ClosedModel):
    """Configuration for the macOS bundles.

    See more: <https://tauri.app/v1/api/config#macconfig>
    """

    frameworks: Optional[List[StrictStr]] = None
    """A list of strings indicating any macOS X frameworks that need to be bundled with the application.

    If a name is used, ".framework" must be omitted and it will look for standard install locations. You may also use a path to a specific framework.
    """
    minimum_system_version: Optional[StrictStr] = Field(
        default=None, alias="minimumSystemVersion"
    )
    """A version string indicating the minimum macOS X version that the bundled application supports. Defaults to `10.13`.

    Setting it to `null` completely removes the `LSMinimumSystemVersion` field on the bundle's `Info.plist` and the `MACOSX_DEPLOYMENT_TARGET` environment variable.

    An empty string is considered an invalid value so the default value is used.
    """
    exception_domain: Optional[StrictStr] = Field(default=None, alias="exceptionDomain")
    """Allows your application to communicate with the outside world. It should be a lowercase, without port and protocol domain name."""
    license: Optional[StrictStr] = None
    """The path to the license file to add to the DMG bundle."""
    signing_identity: Optional[StrictStr] = Field(default=None, alias="signingIdentity")
    """Identity to use for code signing."""
    provider_short_name: Optional[StrictStr] = Field(
        default=None, alias="providerShortName"
    )
    """Provider short name for notarization."""
    entitlements: Optional[StrictStr] = None
    """Path to the entitlements file."""


class WebviewInstallModeSkip(_ClosedModel):
    """Do not install the Webview2 as part of the Windows Installer."""

    type: Literal["skip"]


class WebviewInstallModeDownloadBootstrapper(_ClosedModel):
    """Download the bootstrapper and run it. Requires an internet connection. Results in a smaller installer size, but is not recommended on Windows 7."""

    type: Literal["downloadBootstrapper"]
    silent: StrictBool = None
    """Instructs the installer to run the bootstrapper in silent mode. Defaults to `true`."""


class WebviewInstallModeEmbedBootstrapper(_ClosedModel):
    """Embed the bootstrapper and run it. Requires an internet connection. Increases the installer size by around 1.8MB, but offers better support on Windows 7."""

    type: Literal["embedBootstrapper"]
    silent: StrictBool = None
    """Instructs the installer to run the bootstrapper in silent mode. Defaults to `true`."""


class WebviewInstallModeOfflineInstaller(_ClosedModel):
    """Embed the offline installer and run it. Does not require an internet connection. Increases the installer size by around 127MB."""

    type: Literal["offlineInstaller"]
    silent: StrictBool = None
    """Instructs the installer to run the installer in silent mode. Defaults to `true`."""


class WebviewInstallModeFixedRuntime(_ClosedModel):
    """Embed a fixed webview2 version and use it at runtime. Increases the installer size by around 180MB."""

    type: Literal["fixedRuntime"]
    path: StrictStr
    """The path to the fixed runtime to use.

    The fixed version can be downloaded [on the official website](https://developer.microsoft.com/en-us/microsoft-edge/webview2/#download-section). The `.cab` file must be extracted to a folder and this folder path must be defined on this field.
    """


# Install modes for the Webview2 runtime. Note that for the updater bundle
# [`Self::DownloadBootstrapper`] is used.
#
# For more information see <https://tauri.app/v1/guides/building/windows>.
WebviewInstallMode = Annotated[
    Union[
        WebviewInstallModeSkip,
        WebviewInstallModeDownloadBootstrapper,
        WebviewInstallModeEmbedBootstrapper,
        WebviewInstallModeOfflineInstaller,
        WebviewInstallModeFixedRuntime,
    ],
    Field(discriminator="type"),
]


class WixLanguageConfig(_ClosedModel):
    """Configuration for a target language for the WiX build.

    See more: <https://tauri.app/v1/api/config#wixlanguageconfig>
    """

    locale_path: Optional[StrictStr] = Field(default=None, alias="localePath")
    """The path to a locale (`.wxl`) file. See <https://wixtoolset.org/documentation/manual/v3/howtos/ui_and_localization/build_a_localized_version.html>."""


# The languages to build using WiX.
WixLanguage = Union[StrictStr, List[StrictStr], Dict[str, WixLanguageConfig]]


class WixConfig(_ClosedModel):
    """Configuration for the MSI bundle using WiX.

    See more: <https://tauri.app/v1/api/config#wixconfig>
    """

    language: WixLanguage = None
    """The installer languages to build. See <https://docs.microsoft.com/en-us/windows/win32/msi/localizing-the-error-and-actiontext-tables>."""
    template: Optional[StrictStr] = None
    """A custom .wxs template to use."""
    fragment_paths: List[StrictStr] = Field(default=None, alias="fragmentPaths")
    """A list of paths to .wxs files with WiX fragments to use."""
    component_group_refs: List[StrictStr] = Field(
        default=None, alias="componentGroupRefs"
    )
    """The ComponentGroup element ids you want to reference from the fragments."""
    component_refs: List[StrictStr] = Field(default=None, alias="componentRefs")
    """The Component element ids you want to reference from the fragments."""
    feature_group_refs: List[StrictStr] = Field(default=None, alias="featureGroupRefs")
    """The FeatureGroup element ids you want to reference from the fragments."""
    feature_refs: List[StrictStr] = Field(default=None, alias="featureRefs")
    """The Feature element ids you want to reference from the fragments."""
    merge_refs: List[StrictStr] = Field(default=None, alias="mergeRefs")
    """The Merge element ids you want to reference from the fragments."""
    skip_webview_install: StrictBool = Field(default=None, alias="skipWebviewInstall")
    """Disables the Webview2 runtime installation after app install.

    Will be removed in v2, prefer the [`WindowsConfig::webview_install_mode`] option.
    """
    license: Optional[StrictStr] = None
    """The path to the license file to render on the installer.

    Must be an RTF file, so if a different extension is provided, we convert it to the RTF format.
    """
    enable_elevated_update_task: StrictBool = Field(
        default=None, alias="enableElevatedUpdateTask"
    )
    """Create an elevated update task within Windows Task Scheduler."""
    banner_path: Optional[StrictStr] = Field(default=None, alias="bannerPath")
    """Path to a bitmap file to use as the installation user interface banner. This bitmap will appear at the top of all but the first page of the installer.

    The required dimensions are 493px × 58px.
    """
    dialog_image_path: Optional[StrictStr] = Field(
        default=None, alias="dialogImagePath"
    )
    """Path to a bitmap file to use on the installation user interface dialogs. It is used on the welcome and completion dialogs. The required dimensions are 493px × 312px."""


# Install Modes for the NSIS installer.
NSISInstallerMode = Literal["currentUser", "perMachine", "both"]


# Compression algorithms used in the NSIS installer.
#
# See <https://nsis.sourceforge.io/Reference/SetCompressor>
NsisCompression = Literal["zlib", "bzip2", "lzma"]


class NsisConfig(_ClosedModel):
    """Configuration for the Installer bundle using NSIS."""

    template: Optional[StrictStr] = None
    """A custom .nsi template to use."""
    license: Optional[StrictStr] = None
    """The path to the license file to render on the installer."""
    header_image: Optional[StrictStr] = Field(default=None, alias="headerImage")
    """The path to a bitmap file to display on the header of installers pages.

    The recommended dimensions are 150px x 57px.
    """
    sidebar_image: Optional[StrictStr] = Field(default=None, alias="sidebarImage")
    """The path to a bitmap file for the Welcome page and the Finish page.

    The recommended dimensions are 164px x 314px.
    """
    installer_icon: Optional[StrictStr] = Field(default=None, alias="installerIcon")
    """The path to an icon file used as the installer icon."""
    install_mode: NSISInstallerMode = Field(default=None, alias="installMode")
    """Whether the installation will be for all users or just the current user."""
    languages: Optional[List[StrictStr]] = None
    """A list of installer languages. By default the OS language is used. If the OS language is not in the list of languages, the first language will be used. To allow the user to select the language, set `display_language_selector` to `true`.

    See <https://github.com/kichik/nsis/tree/9465c08046f00ccb6eda985abbdbf52c275c6c4d/Contrib/Language%20files> for the complete list of languages.
    """
    custom_language_files: Optional[Dict[str, StrictStr]] = Field(
        default=None, alias="customLanguageFiles"
    )
    """A key-value pair where the key is the language and the value is the path to a custom `.nsh` file that holds the translated text for tauri's custom messages.

    See <https://github.com/tauri-apps/tauri/blob/dev/tooling/bundler/src/bundle/windows/templates/nsis-languages/English.nsh> for an example `.nsh` file.

    **Note**: the key must be a valid NSIS language and it must be added to [`NsisConfig`] languages array,
    """
    display_language_selector: StrictBool = Field(
        default=None, alias="displayLanguageSelector"
    )
    """Whether to display a language selector dialog before the installer and uninstaller windows are rendered or not. By default the OS language is selected, with a fallback to the first language in the `languages` array."""
    compression: Optional[NsisCompression] = None
    """Set the compression algorithm used to compress files in the installer.

    See <https://nsis.sourceforge.io/Reference/SetCompressor>
    """


class WindowsConfig(_ClosedModel):
    """Windows bundler configuration.

    See more: <https://tauri.app/v1/api/config#windowsconfig>
    """

    digest_algorithm: Optional[StrictStr] = Field(default=None, alias="digestAlgorithm")
    """Specifies the file digest algorithm to use for creating file signatures. Required for code signing. SHA-256 is recommended."""
    certificate_thumbprint: Optional[StrictStr] = Field(
        default=None, alias="certificateThumbprint"
    )
    """Specifies the SHA1 hash of the signing certificate."""
    timestamp_url: Optional[StrictStr] = Field(default=None, alias="timestampUrl")
    """Server to use during timestamping."""
    tsp: StrictBool = None
    """Whether to use Time-Stamp Protocol (TSP, a.k.a. RFC 3161) for the timestamp server. Your code signing provider may use a TSP timestamp server, like e.g. SSL.com does. If so, enable TSP by setting to true."""
    webview_install_mode: WebviewInstallMode = Field(
        default=None, alias="webviewInstallMode"
    )
    """The installation mode for the Webview2 runtime."""
    webview_fixed_runtime_path: Optional[StrictStr] = Field(
        default=None, alias="webviewFixedRuntimePath"
    )
    """Path to the webview fixed runtime to use. Overwrites [`Self::webview_install_mode`] if set.

    Will be removed in v2, prefer the [`Self::webview_install_mode`] option.

    The fixed version can be downloaded [on the official website](https://developer.microsoft.com/en-us/microsoft-edge/webview2/#download-section). The `.cab` file must be extracted to a folder and this folder path must be defined on this field.
    """
    allow_downgrades: StrictBool = Field(default=None, alias="allowDowngrades")
    """Validates a second app installation, blocking the user from installing an older version if set to `false`.

    For instance, if `1.2.1` is installed, the user won't be able to install app version `1.2.0` or `1.1.5`.

    The default value of this flag is `true`.
    """
    wix: Optional[WixConfig] = None
    """Configuration for the MSI generated with WiX."""
    nsis: Optional[NsisConfig] = None
    """Configuration for the installer generated with NSIS."""


class IosConfig(_ClosedModel):
    """General configuration for the iOS target."""

    development_team: Optional[StrictStr] = Field(
        default=None, alias="developmentTeam"
    )
    """The development team. This value is required for iOS development because code signing is enforced. The `APPLE_DEVELOPMENT_TEAM` environment variable can be set to overwrite it."""


class AndroidConfig(_ClosedModel):
    """General configuration for the iOS target."""

    min_sdk_version: Annotated[StrictInt, Field(ge=0, le=4294967295)] = Field(
        default=None, alias="minSdkVersion"
    )
    """The minimum API level required for the application to run. The Android system will prevent the user from installing the application if the system's API level is lower than the value specified."""


# Install modes for the Windows update.
WindowsUpdateInstallMode = Literal["basicUi", "quiet", "passive"]


class UpdaterWindowsConfig(_ClosedModel):
    """The updater configuration for Windows.

    See more: <https://tauri.app/v1/api/config#updaterwindowsconfig>
    """

    install_mode: WindowsUpdateInstallMode = Field(default=None, alias="installMode")
    """The installation mode for the update on Windows. Defaults to `passive`."""


class UpdaterConfig(_ClosedModel):
    """The Updater configuration object.

    See more: <https://tauri.app/v1/api/config#updaterconfig>
    """

    active: StrictBool = None
    """Whether the updater is active or not."""
    pubkey: StrictStr = None
    """Signature public key."""
    windows: UpdaterWindowsConfig = None
    """The Windows configuration for the updater."""


class BundleConfig(_ClosedModel):
    """Configuration for tauri-bundler.

    See more: <https://tauri.app/v1/api/config#bundleconfig>
    """

    active: StrictBool = None
    """Whether Tauri should bundle your application or just output the executable."""
    targets: BundleTarget = None
    """The bundle targets, currently supports ["deb", "appimage", "nsis", "msi", "app", "dmg", "updater"] or "all"."""
    identifier: StrictStr
    """The application identifier in reverse domain name notation (e.g. `com.tauri.example`). This string must be unique across applications since it is used in system configurations like the bundle ID and path to the webview data directory. This string must contain only alphanumeric characters (A–Z, a–z, and 0–9), hyphens (-), and periods (.)."""
    publisher: Optional[StrictStr] = None
    """The application's publisher. Defaults to the second element in the identifier string. Currently maps to the Manufacturer property of the Windows Installer."""
    icon: List[StrictStr] = None
    """The app's icons"""
    resources: Optional[BundleResources] = None
    """App resources to bundle. Each resource is a path to a file or directory. Glob patterns are supported."""
    copyright: Optional[StrictStr] = None
    """A copyright string associated with your application."""
    category: Optional[StrictStr] = None
    """The application kind.

    Should be one of the following: Business, DeveloperTool, Education, Entertainment, Finance, Game, ActionGame, AdventureGame, ArcadeGame, BoardGame, CardGame, CasinoGame, DiceGame, EducationalGame, FamilyGame, KidsGame, MusicGame, PuzzleGame, RacingGame, RolePlayingGame, SimulationGame, SportsGame, StrategyGame, TriviaGame, WordGame, GraphicsAndDesign, HealthcareAndFitness, Lifestyle, Medical, Music, News, Photography, Productivity, Reference, SocialNetworking, Sports, Travel, Utility, Video, Weather.
    """
    file_associations: Optional[List[FileAssociation]] = Field(
        default=None, alias="fileAssociations"
    )
    """File associations to application."""
    short_description: Optional[StrictStr] = Field(
        default=None, alias="shortDescription"
    )
    """A short description of your application."""
    long_description: Optional[StrictStr] = Field(default=None, alias="longDescription")
    """A longer, multi-line description of the application."""
    appimage: AppImageConfig = None
    """Configuration for the AppImage bundle."""
    deb: DebConfig = None
    """Configuration for the Debian bundle."""
    dmg: DmgConfig = None
    """DMG-specific settings."""
    mac_os: MacConfig = Field(default=None, alias="macOS")
    """Configuration for the macOS bundles."""
    external_bin: Optional[List[StrictStr]] = Field(default=None, alias="externalBin")
    """A list of—either absolute or relative—paths to binaries to embed with your application.

    Note that Tauri will look for system-specific binaries following the pattern "binary-name{-target-triple}{.system-extension}".

    E.g. for the external binary "my-binary", Tauri looks for:

    - "my-binary-x86_64-pc-windows-msvc.exe" for Windows - "my-binary-x86_64-apple-darwin" for macOS - "my-binary-x86_64-unknown-linux-gnu" for Linux

    so don't forget to provide binaries for all targeted platforms.
    """
    windows: WindowsConfig = None
    """Configuration for the Windows bundle."""
    i_os: IosConfig = Field(default=None, alias="iOS")
    """iOS configuration."""
    android: AndroidConfig = None
    """Android configuration."""
    updater: UpdaterConfig = None
    """The updater configuration."""


# A Content-Security-Policy directive source list. See
# <https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/Content-Security-Policy/Sources#sources>.
CspDirectiveSources = Union[StrictStr, List[StrictStr]]


# A Content-Security-Policy definition. See
# <https://developer.mozilla.org/en-US/docs/Web/HTTP/CSP>.
Csp = Union[StrictStr, Dict[str, CspDirectiveSources]]


# The possible values for the `dangerous_disable_asset_csp_modification` config
# option.
DisabledCspModificationKind = Union[StrictBool, List[StrictStr]]


class RemoteDomainAccessScope(_ClosedModel):
    """External command access definition."""

    scheme: Optional[StrictStr] = None
    """The URL scheme to allow. By default, all schemas are allowed."""
    domain: StrictStr
    """The domain to allow."""
    windows: List[StrictStr]
    """The list of window labels this scope applies to."""
    plugins: List[StrictStr] = None
    """The list of plugins that are allowed in this scope. The names should be without the `tauri-plugin-` prefix, for example `"store"` for `tauri-plugin-store`."""


class FsScopeObject(_OpenModel):
    allow: List[StrictStr] = None
    """A list of paths that are allowed by this scope."""
    deny: List[StrictStr] = None
    """A list of paths that are not allowed by this scope. This gets precedence over the [`Self::Scope::allow`] list."""
    require_literal_leading_dot: Optional[StrictBool] = Field(
        default=None, alias="requireLiteralLeadingDot"
    )
    """Whether or not paths that contain components that start with a `.` will require that `.` appears literally in the pattern; `*`, `?`, `**`, or `[...]` will not match. This is useful because such files are conventionally considered hidden on Unix systems and it might be desirable to skip them when listing files.

    Defaults to `true` on Unix systems and `false` on Windows
    """


# Protocol scope definition. It is a list of glob patterns that restrict the API
# access from the webview.
#
# Each pattern can start with a variable that resolves to a system base directory.
# The variables are: `$AUDIO`, `$CACHE`, `$CONFIG`, `$DATA`, `$LOCALDATA`,
# `$DESKTOP`, `$DOCUMENT`, `$DOWNLOAD`, `$EXE`, `$FONT`, `$HOME`, `$PICTURE`,
# `$PUBLIC`, `$RUNTIME`, `$TEMPLATE`, `$VIDEO`, `$RESOURCE`, `$APP`, `$LOG`,
# `$TEMP`, `$APPCONFIG`, `$APPDATA`, `$APPLOCALDATA`, `$APPCACHE`, `$APPLOG`.
FsScope = Union[List[StrictStr], FsScopeObject]


class AssetProtocolConfig(_ClosedModel):
    """Config for the asset custom protocol.

    See more: <https://tauri.app/v1/api/config#assetprotocolconfig>
    """

    scope: FsScope = None
    """The access scope for the asset protocol."""
    enable: StrictBool = None
    """Enables the asset protocol."""


class SecurityConfig(_ClosedModel):
    """Security configuration.

    See more: <https://tauri.app/v1/api/config#securityconfig>
    """

    csp: Optional[Csp] = None
    """The Content Security Policy that will be injected on all HTML files on the built application. If [`dev_csp`](#SecurityConfig.devCsp) is not specified, this value is also injected on dev.

    This is a really important part of the configuration since it helps you ensure your WebView is secured. See <https://developer.mozilla.org/en-US/docs/Web/HTTP/CSP>.
    """
    dev_csp: Optional[Csp] = Field(default=None, alias="devCsp")
    """The Content Security Policy that will be injected on all HTML files on development.

    This is a really important part of the configuration since it helps you ensure your WebView is secured. See <https://developer.mozilla.org/en-US/docs/Web/HTTP/CSP>.
    """
    freeze_prototype: StrictBool = Field(default=None, alias="freezePrototype")
    """Freeze the `Object.prototype` when using the custom protocol."""
    dangerous_disable_asset_csp_modification: DisabledCspModificationKind = Field(
        default=None, alias="dangerousDisableAssetCspModification"
    )
    """Disables the Tauri-injected CSP sources.

    At compile time, Tauri parses all the frontend assets and changes the Content-Security-Policy to only allow loading of your own scripts and styles by injecting nonce and hash sources. This stricts your CSP, which may introduce issues when using along with other flexing sources.

    This configuration option allows both a boolean and a list of strings as value. A boolean instructs Tauri to disable the injection for all CSP injections, and a list of strings indicates the CSP directives that Tauri cannot inject.

    **WARNING:** Only disable this if you know what you are doing and have properly configured the CSP. Your application might be vulnerable to XSS attacks without this Tauri protection.
    """
    dangerous_remote_domain_ipc_access: List[RemoteDomainAccessScope] = Field(
        default=None, alias="dangerousRemoteDomainIpcAccess"
    )
    """Allow external domains to send command to Tauri.

    By default, external domains do not have access to `window.__TAURI__`, which means they cannot communicate with the commands defined in Rust. This prevents attacks where an externally loaded malicious or compromised sites could start executing commands on the user's device.

    This configuration allows a set of external domains to have access to the Tauri commands. When you configure a domain to be allowed to access the IPC, all subpaths are allowed. Subdomains are not allowed.

    **WARNING:** Only use this option if you either have internal checks against malicious external sites or you can trust the allowed external sites. You application might be vulnerable to dangerous Tauri command related attacks otherwise.
    """
    asset_protocol: AssetProtocolConfig = Field(default=None, alias="assetProtocol")
    """Custom protocol config."""


class TrayIconConfig(_ClosedModel):
    """Configuration for application tray icon.

    See more: <https://tauri.app/v1/api/config#trayiconconfig>
    """

    id: Optional[StrictStr] = None
    """Set an id for this tray icon so you can reference it later, defaults to `main`."""
    icon_path: StrictStr = Field(alias="iconPath")
    """Path to the default icon to use for the tray icon."""
    icon_as_template: StrictBool = Field(default=None, alias="iconAsTemplate")
    """A Boolean value that determines whether the image represents a [template](https://developer.apple.com/documentation/appkit/nsimage/1520017-template?language=objc) image on macOS."""
    menu_on_left_click: StrictBool = Field(default=None, alias="menuOnLeftClick")
    """A Boolean value that determines whether the menu should appear when the tray icon receives a left click on macOS."""
    title: Optional[StrictStr] = None
    """Title for MacOS tray"""
    tooltip: Optional[StrictStr] = None
    """Tray icon tooltip on Windows and macOS"""


class TauriConfig(_ClosedModel):
    """The Tauri configuration object.

    See more: <https://tauri.app/v1/api/config#tauriconfig>
    """

    pattern: PatternKind = None
    """The pattern to use."""
    windows: List[WindowConfig] = None
    """The windows configuration."""
    bundle: BundleConfig = None
    """The bundler configuration."""
    security: SecurityConfig = None
    """Security configuration."""
    tray_icon: Optional[TrayIconConfig] = Field(default=None, alias="trayIcon")
    """Configuration for app tray icon."""
    mac_os_private_api: StrictBool = Field(default=None, alias="macOSPrivateApi")
    """MacOS private API configuration. Enables the transparent background API and sets the `fullScreenEnabled` preference to `true`."""


# Defines the URL or assets to embed in the application.
AppUrl = Union[WindowUrl, List[StrictStr]]


class BeforeDevCommandObject(_OpenModel):
    """Run the given script with the given options."""

    script: StrictStr
    """The script to execute."""
    cwd: Optional[StrictStr] = None
    """The current working directory."""
    wait: StrictBool = None
    """Whether `tauri dev` should wait for the command to finish or not. Defaults to `false`."""


# Describes the shell command to run before `tauri dev`.
BeforeDevCommand = Union[StrictStr, BeforeDevCommandObject]


class HookCommandObject(_OpenModel):
    """Run the given script with the given options."""

    script: StrictStr
    """The script to execute."""
    cwd: Optional[StrictStr] = None
    """The current working directory."""


# Describes a shell command to be executed when a CLI hook is triggered.
HookCommand = Union[StrictStr, HookCommandObject]


class BuildConfig(_ClosedModel):
    """The Build configuration object.

    See more: <https://tauri.app/v1/api/config#buildconfig>
    """

    runner: Optional[StrictStr] = None
    """The binary used to build and run the application."""
    dev_path: AppUrl = Field(default=None, alias="devPath")
    """The path to the application assets or URL to load in development.

    This is usually an URL to a dev server, which serves your application assets with live reloading. Most modern JavaScript bundlers provides a way to start a dev server by default.

    See [vite](https://vitejs.dev/guide/), [Webpack DevServer](https://webpack.js.org/configuration/dev-server/) and [sirv](https://github.com/lukeed/sirv) for examples on how to set up a dev server.
    """
    dist_dir: AppUrl = Field(default=None, alias="distDir")
    """The path to the application assets or URL to load in production.

    When a path relative to the configuration file is provided, it is read recursively and all files are embedded in the application binary. Tauri then looks for an `index.html` file unless you provide a custom window URL.

    You can also provide a list of paths to be embedded, which allows granular control over what files are added to the binary. In this case, all files are added to the root and you must reference it that way in your HTML files.

    When an URL is provided, the application won't have bundled assets and the application will load that URL by default.
    """
    before_dev_command: Optional[BeforeDevCommand] = Field(
        default=None, alias="beforeDevCommand"
    )
    """A shell command to run before `tauri dev` kicks in.

    The TAURI_ENV_PLATFORM, TAURI_ENV_ARCH, TAURI_ENV_FAMILY, TAURI_ENV_PLATFORM_VERSION, TAURI_ENV_PLATFORM_TYPE and TAURI_ENV_DEBUG environment variables are set if you perform conditional compilation.
    """
    before_build_command: Optional[HookCommand] = Field(
        default=None, alias="beforeBuildCommand"
    )
    """A shell command to run before `tauri build` kicks in.

    The TAURI_ENV_PLATFORM, TAURI_ENV_ARCH, TAURI_ENV_FAMILY, TAURI_ENV_PLATFORM_VERSION, TAURI_ENV_PLATFORM_TYPE and TAURI_ENV_DEBUG environment variables are set if you perform conditional compilation.
    """
    before_bundle_command: Optional[HookCommand] = Field(
        default=None, alias="beforeBundleCommand"
    )
    """A shell command to run before the bundling phase in `tauri build` kicks in.

    The TAURI_ENV_PLATFORM, TAURI_ENV_ARCH, TAURI_ENV_FAMILY, TAURI_ENV_PLATFORM_VERSION, TAURI_ENV_PLATFORM_TYPE and TAURI_ENV_DEBUG environment variables are set if you perform conditional compilation.
    """
    features: Optional[List[StrictStr]] = None
    """Features passed to `cargo` commands."""
    with_global_tauri: StrictBool = Field(default=None, alias="withGlobalTauri")
    """Whether we should inject the Tauri API on `window.__TAURI__` or not."""


# The plugin configs holds a HashMap mapping a plugin name to its configuration
# object.
#
# See more: <https://tauri.app/v1/api/config#pluginconfig>
PluginConfig = Dict[str, Any]


class Config(_ClosedModel):
    """The Tauri configuration object. It is read from a file where you can define your frontend assets, configure the bundler and define a tray icon.

    The configuration file is generated by the [`tauri init`](https://tauri.app/v1/api/cli#init) command that lives in your Tauri application source directory (src-tauri).

    Once generated, you may modify it at will to customize your Tauri application.

    ## File Formats

    By default, the configuration is defined as a JSON file named `tauri.conf.json`.

    Tauri also supports JSON5 and TOML files via the `config-json5` and `config-toml` Cargo features, respectively. The JSON5 file name must be either `tauri.conf.json` or `tauri.conf.json5`. The TOML file name is `Tauri.toml`.

    ## Platform-Specific Configuration

    In addition to the default configuration file, Tauri can read a platform-specific configuration from `tauri.linux.conf.json`, `tauri.windows.conf.json`, `tauri.macos.conf.json`, `tauri.android.conf.json` and `tauri.ios.conf.json` (or `Tauri.linux.toml`, `Tauri.windows.toml`, `Tauri.macos.toml`, `Tauri.android.toml` and `Tauri.ios.toml` if the `Tauri.toml` format is used), which gets merged with the main configuration object.

    ## Configuration Structure

    The configuration is composed of the following objects:

    - [`package`](#packageconfig): Package settings - [`tauri`](#tauriconfig): The Tauri config - [`build`](#buildconfig): The build configuration - [`plugins`](#pluginconfig): The plugins config

    ```json title="Example tauri.config.json file" { "build": { "beforeBuildCommand": "", "beforeDevCommand": "", "devPath": "../dist", "distDir": "../dist" }, "package": { "productName": "tauri-app", "version": "0.1.0" }, "tauri": { "bundle": {}, "security": { "csp": null }, "windows": [ { "fullscreen": false, "height": 600, "resizable": true, "title": "Tauri App", "width": 800 } ] } } ```
    """

    schema_: Optional[StrictStr] = Field(default=None, alias="$schema")
    """The JSON schema for the Tauri config."""
    package: PackageConfig = None
    """Package settings."""
    tauri: TauriConfig = None
    """The Tauri configuration."""
    build: BuildConfig = None
    """The build configuration."""
    plugins: PluginConfig = None
    """The plugins config."""
