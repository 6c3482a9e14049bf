from gi.repository import Gio, GLib  # pyright: ignore
import threading

NOTIFY_EXPIRE_TIMEOUT = 5000


class Notifier:
    """Sends desktop notifications over org.freedesktop.Notifications."""

    def __init__(self, logger, default_app_name: str = "VirtualBox machines launcher"):
        self.logger = logger
        self.default_app_name = default_app_name
        self.loop = GLib.MainLoop()
        self.loop_thread = threading.Thread(target=self.loop.run, daemon=True)
        self.loop_thread.start()

    def stop(self):
        if self.loop.is_running():
            self.loop.quit()

    def _on_notification_sent(self, proxy, result, *args):
        try:
            proxy.call_finish(result)
        except GLib.Error as e:
            self.logger.error(f"Error sending notification: {e}")

    def _make_proxy(self, result):
        connection = Gio.bus_get_finish(result)
        return Gio.DBusProxy.new_sync(
            connection,
            Gio.DBusProxyFlags.NONE,
            None,
            "org.freedesktop.Notifications",
            "/org/freedesktop/Notifications",
            "org.freedesktop.Notifications",
            None,
        )

    def _on_bus_acquired(self, source_object, result, user_data):
        title, message, icon, app_name = user_data
        try:
            proxy = self._make_proxy(result)
            proxy.call(
                "Notify",
                GLib.Variant(
                    "(susssasa{sv}i)",
                    (
                        app_name,
                        0,
                        icon,
                        title,
                        message,
                        [],
                        {},
                        NOTIFY_EXPIRE_TIMEOUT,
                    ),
                ),
                Gio.DBusCallFlags.NONE,
                -1,
                None,
                self._on_notification_sent,
            )
        except GLib.Error as e:
            self.logger.error(f"Error preparing notification: {e}")

    def notify_send(self, title: str, message: str, icon: str = "", app_name: str = ""):
        """
        Sends a desktop notification.
        Args:
            title (str): The summary text.
            message (str): The body text.
            icon (str): Name of the icon to display (e.g., 'dialog-error').
            app_name (str): The application name to display. Defaults to the
                            name given to the constructor.
        """
        Gio.bus_get(
            Gio.BusType.SESSION,
            None,
            self._on_bus_acquired,
            (title, message, icon, app_name or self.default_app_name),
        )
