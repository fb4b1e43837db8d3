from datetime import date, datetime, timedelta, timezone
from typing import Any, Iterable

from zoomkit.exceptions.zoom_exceptions import ZoomNotImplementedError, ZoomValidationError
from zoomkit.sources.client.zoom.zoom import (
    BROAD_POLICY,
    STRICT_POLICY,
    ResponsePolicy,
    ZoomClient,
    ZoomResponse,
)

# Reads only accept 200; writes also accept 201/202/204 with an empty body
READ = STRICT_POLICY
WRITE = BROAD_POLICY

MEETING_TYPES = (1, 2, 3, 8)
INSTANT_MEETING = 1
SCHEDULED_MEETING = 2
LIVE_OR_PAST = ("live", "past")
ENCRYPTION_MODES = ("auto", "yes", "no")
DEVICE_PROTOCOLS = ("H.323", "SIP")
ROOM_SETTING_TYPES = ("meeting", "alert", "signage")


class ZoomDataSource:
    """Zoom API client wrapper.
    - Uses the request engine passed as `ZoomClient`
    - Provides one coroutine per Zoom API operation
    - Arguments are validated before any request is built; invalid values
      raise ZoomValidationError
    - All methods return ZoomResponse objects
    """

    def __init__(self, client: ZoomClient) -> None:
        """Initialize with ZoomClient."""
        if client is None:
            raise ValueError("Zoom client is not initialized")
        self._client = client

    async def _request(
        self,
        method: str,
        path: str,
        *,
        policy: ResponsePolicy,
        query: dict[str, Any] | None = None,
        path_params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> ZoomResponse:
        return await self._client.return_response(
            method,
            path,
            query_params=query,
            path_params=path_params,
            body=body,
            policy=policy,
        )

    # ========================================================================
    # MEETING APIs
    # ========================================================================

    async def list_meetings(
        self,
        user_id: str,
        type: str = "live",
        page_size: int = 30,
        page_number: int | None = None,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """List all meetings for a user
        HTTP GET /users/{userId}/meetings

        Args:
            user_id: The user ID or email address
            type: Meeting type (live, upcoming, scheduled)
            page_size: Number of records returned per page (30-300)
            page_number: Page number of results
            next_page_token: Next page token for pagination

        Returns:
            ZoomResponse

        """
        _check_choice("type", type, ("live", "upcoming", "scheduled"), "Invalid meeting type.")
        _check_page_size(page_size)
        return await self._request(
            "GET",
            "/users/{userId}/meetings",
            policy=READ,
            path_params={"userId": user_id},
            query={
                "type": type,
                "page_size": page_size,
                "page_number": page_number,
                "next_page_token": next_page_token,
            },
        )

    async def create_meeting(
        self,
        user_id: str,
        topic: str,
        agenda: str | None = None,
        type: int = SCHEDULED_MEETING,
        start_time: datetime | None = None,
        duration: int | None = 30,
        password: str | None = None,
        default_password: bool = False,
        tracking_fields: list[dict[str, Any]] | None = None,
        recurrence: dict[str, Any] | None = None,
        settings: dict[str, Any] | None = None,
        pre_schedule: bool = False,
        schedule_for: str | None = None,
        template_id: str | None = None,
    ) -> ZoomResponse:
        """Create a meeting for a user
        HTTP POST /users/{userId}/meetings

        Args:
            user_id: The user ID or email address
            topic: Meeting topic
            agenda: Meeting description
            type: 1 instant, 2 scheduled, 3 recurring without fixed time, 8 recurring with fixed time
            start_time: Meeting start time, converted to UTC
            duration: Duration in minutes
            password: Meeting passcode
            default_password: Generate a passcode from the user's settings
            tracking_fields: Tracking field objects
            recurrence: Recurrence object for types 3 and 8
            settings: Meeting settings object
            pre_schedule: Create a pre-scheduled meeting (GSuite)
            schedule_for: Email or ID of the user the meeting is scheduled for (defaults to user_id)
            template_id: Meeting template to apply

        Returns:
            ZoomResponse

        """
        _check_choice("type", type, MEETING_TYPES, "Invalid meeting type.")
        body = _drop_none({
            "topic": topic,
            "type": type,
            "pre_schedule": pre_schedule,
            "start_time": _format_datetime(start_time) if start_time else None,
            "duration": duration,
            "schedule_for": schedule_for or user_id,
            "password": password,
            "default_password": default_password,
            "agenda": agenda,
            "tracking_fields": tracking_fields,
            "recurrence": recurrence,
            "settings": settings,
            "template_id": template_id,
        })
        return await self._request(
            "POST",
            "/users/{userId}/meetings",
            policy=WRITE,
            path_params={"userId": user_id},
            body=body,
        )

    async def get_meeting(
        self,
        meeting_id: str,
        occurrence_id: str | None = None,
        show_previous_occurrences: bool = False,
    ) -> ZoomResponse:
        """Get a meeting
        HTTP GET /meetings/{meetingId}

        Args:
            meeting_id: The meeting ID. Kept as a string; large numeric IDs lose precision as floats.
            occurrence_id: Occurrence of a recurring meeting
            show_previous_occurrences: Include previous occurrences of a recurring meeting

        Returns:
            ZoomResponse

        """
        return await self._request(
            "GET",
            "/meetings/{meetingId}",
            policy=READ,
            path_params={"meetingId": meeting_id},
            query={
                "occurrence_id": occurrence_id,
                "show_previous_occurrences": show_previous_occurrences,
            },
        )

    async def update_meeting(
        self,
        meeting_id: str,
        occurrence_id: str | None = None,
        schedule_for: str | None = None,
        topic: str | None = None,
        agenda: str | None = None,
        type: int | None = None,
        pre_schedule: bool | None = None,
        start_time: datetime | None = None,
        duration: int | None = None,
        password: str | None = None,
        template_id: str | None = None,
        tracking_fields: list[dict[str, Any]] | None = None,
        recurrence: dict[str, Any] | None = None,
        settings: dict[str, Any] | None = None,
    ) -> ZoomResponse:
        """Update a meeting. Only the fields given are sent.
        HTTP PATCH /meetings/{meetingId}

        Returns:
            ZoomResponse

        """
        if type is not None:
            _check_choice("type", type, MEETING_TYPES, "Invalid meeting type.")
        body = _compact({
            "schedule_for": schedule_for,
            "topic": topic,
            "agenda": agenda,
            "type": type,
            "pre_schedule": pre_schedule,
            "start_time": _format_datetime(start_time) if start_time else None,
            "duration": duration,
            "password": password,
            "template_id": template_id,
            "tracking_fields": tracking_fields,
            "recurrence": recurrence,
            "settings": settings,
        })
        return await self._request(
            "PATCH",
            "/meetings/{meetingId}",
            policy=WRITE,
            path_params={"meetingId": meeting_id},
            query={"occurrence_id": occurrence_id},
            body=body,
        )

    async def delete_meeting(
        self,
        meeting_id: str,
        occurrence_id: str | None = None,
        schedule_for_reminder: bool = True,
        cancel_meeting_reminder: bool = False,
    ) -> ZoomResponse:
        """Delete a meeting
        HTTP DELETE /meetings/{meetingId}

        Args:
            meeting_id: The meeting ID
            occurrence_id: Delete only this occurrence of a recurring meeting
            schedule_for_reminder: Notify the host and alternative host
            cancel_meeting_reminder: Notify registrants of the cancellation

        Returns:
            ZoomResponse

        """
        return await self._request(
            "DELETE",
            "/meetings/{meetingId}",
            policy=WRITE,
            path_params={"meetingId": meeting_id},
            query={
                "occurrence_id": occurrence_id,
                "schedule_for_reminder": schedule_for_reminder,
                "cancel_meeting_reminder": cancel_meeting_reminder,
            },
        )

    async def update_meeting_status(self, meeting_id: str, action: str) -> ZoomResponse:
        """End or recover a meeting
        HTTP PUT /meetings/{meetingId}/status
        """
        _check_choice("action", action, ("end", "recover"), "Unsupported action.")
        return await self._request(
            "PUT",
            "/meetings/{meetingId}/status",
            policy=WRITE,
            path_params={"meetingId": meeting_id},
            body={"action": action},
        )

    async def list_meeting_registrants(
        self,
        meeting_id: str,
        occurrence_id: str | None = None,
        status: str = "approved",
        page_size: int = 30,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """List meeting registrants
        HTTP GET /meetings/{meetingId}/registrants

        Args:
            meeting_id: The meeting ID
            occurrence_id: Occurrence of a recurring meeting
            status: Registrant status (pending, approved, denied)
            page_size: Number of records returned per page (30-300)
            next_page_token: Next page token for pagination

        Returns:
            ZoomResponse

        """
        _check_page_size(page_size)
        _check_choice("status", status, ("pending", "approved", "denied"), "Unsupported status type.")
        return await self._request(
            "GET",
            "/meetings/{meetingId}/registrants",
            policy=READ,
            path_params={"meetingId": meeting_id},
            query={
                "occurrence_id": occurrence_id,
                "status": status,
                "page_size": page_size,
                "next_page_token": next_page_token,
            },
        )

    async def add_meeting_registrant(
        self,
        meeting_id: str,
        email: str,
        first_name: str,
        occurrence_ids: list[str] | None = None,
        last_name: str | None = None,
        address: str | None = None,
        city: str | None = None,
        country: str | None = None,
        zip: str | None = None,
        state: str | None = None,
        phone: str | None = None,
        industry: str | None = None,
        org: str | None = None,
        job_title: str | None = None,
        purchasing_time_frame: str | None = None,
        role_in_purchase_process: str | None = None,
        no_of_employees: str | None = None,
        comments: str | None = None,
        custom_questions: list[dict[str, str]] | None = None,
        language: str | None = None,
        auto_approve: bool | None = None,
    ) -> ZoomResponse:
        """Register a participant for a meeting
        HTTP POST /meetings/{meetingId}/registrants

        Returns:
            ZoomResponse

        """
        body = {
            "email": email,
            "first_name": first_name,
            **_compact({
                "last_name": last_name,
                "address": address,
                "city": city,
                "country": country,
                "zip": zip,
                "state": state,
                "phone": phone,
                "industry": industry,
                "org": org,
                "job_title": job_title,
                "purchasing_time_frame": purchasing_time_frame,
                "role_in_purchase_process": role_in_purchase_process,
                "no_of_employees": no_of_employees,
                "comments": comments,
                "custom_questions": custom_questions,
                "language": language,
                "auto_approve": auto_approve,
            }),
        }
        return await self._request(
            "POST",
            "/meetings/{meetingId}/registrants",
            policy=WRITE,
            path_params={"meetingId": meeting_id},
            query={"occurrence_ids": occurrence_ids},
            body=body,
        )

    async def delete_meeting_registrant(
        self,
        meeting_id: str,
        registrant_id: str,
        occurrence_id: str | None = None,
    ) -> ZoomResponse:
        """Delete a meeting registrant
        HTTP DELETE /meetings/{meetingId}/registrants/{registrantId}
        """
        return await self._request(
            "DELETE",
            "/meetings/{meetingId}/registrants/{registrantId}",
            policy=WRITE,
            path_params={"meetingId": meeting_id, "registrantId": registrant_id},
            query={"occurrence_id": occurrence_id},
        )

    async def get_meeting_registrant(self, meeting_id: str, registrant_id: str) -> ZoomResponse:
        """Get a meeting registrant
        HTTP GET /meetings/{meetingId}/registrants/{registrantId}
        """
        return await self._request(
            "GET",
            "/meetings/{meetingId}/registrants/{registrantId}",
            policy=READ,
            path_params={"meetingId": meeting_id, "registrantId": registrant_id},
        )

    # ========================================================================
    # MEETING SHORTCUTS
    # ========================================================================

    async def create_instant_meeting(
        self,
        user_id: str,
        topic: str,
        agenda: str | None = None,
        password: str | None = None,
        default_password: bool = False,
        tracking_fields: list[dict[str, Any]] | None = None,
        settings: dict[str, Any] | None = None,
        schedule_for: str | None = None,
        template_id: str | None = None,
    ) -> ZoomResponse:
        """Create an instant (type 1) meeting."""
        return await self.create_meeting(
            user_id=user_id,
            topic=topic,
            agenda=agenda,
            type=INSTANT_MEETING,
            password=password,
            default_password=default_password,
            tracking_fields=tracking_fields,
            settings=settings,
            schedule_for=schedule_for,
            template_id=template_id,
        )

    async def create_scheduled_meeting(
        self,
        user_id: str,
        topic: str,
        start_time: datetime,
        duration: int,
        agenda: str | None = None,
        password: str | None = None,
        default_password: bool = False,
        tracking_fields: list[dict[str, Any]] | None = None,
        settings: dict[str, Any] | None = None,
        pre_schedule: bool = False,
        schedule_for: str | None = None,
        template_id: str | None = None,
    ) -> ZoomResponse:
        """Create a scheduled (type 2) meeting."""
        return await self.create_meeting(
            user_id=user_id,
            topic=topic,
            agenda=agenda,
            type=SCHEDULED_MEETING,
            start_time=start_time,
            duration=duration,
            password=password,
            default_password=default_password,
            tracking_fields=tracking_fields,
            settings=settings,
            pre_schedule=pre_schedule,
            schedule_for=schedule_for,
            template_id=template_id,
        )

    async def end_meeting(self, meeting_id: str) -> ZoomResponse:
        return await self.update_meeting_status(meeting_id=meeting_id, action="end")

    # ========================================================================
    # ARCHIVING APIs
    # ========================================================================

    async def list_archived_files(
        self,
        from_time: datetime | None = None,
        to_time: datetime | None = None,
        page_size: int | None = 30,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """List archived files
        HTTP GET /archive_files

        Args:
            from_time: Start of the range (defaults to one week before today)
            to_time: End of the range (defaults to the start of today, UTC)
            page_size: Number of records returned per page
            next_page_token: Next page token for pagination

        Returns:
            ZoomResponse

        """
        today = datetime.now(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)
        to_time = to_time or today
        from_time = from_time or today - timedelta(weeks=1)
        return await self._request(
            "GET",
            "/archive_files",
            policy=READ,
            query={
                "from": _format_datetime(from_time),
                "to": _format_datetime(to_time),
                "page_size": page_size,
                "next_page_token": next_page_token,
            },
        )

    async def get_meeting_archived_files(self, meeting_uuid: str) -> ZoomResponse:
        """Get a meeting's archived files
        HTTP GET /past_meetings/{meetingUUID}/archive_files

        A UUID starting with `/` or containing `//` is percent-encoded like any other value.
        """
        return await self._request(
            "GET",
            "/past_meetings/{meetingUUID}/archive_files",
            policy=READ,
            path_params={"meetingUUID": meeting_uuid},
        )

    # ========================================================================
    # CLOUD RECORDING APIs
    # ========================================================================

    async def list_all_recordings(
        self,
        user_id: str,
        page_size: int = 30,
        next_page_token: str | None = None,
        mc: str | None = None,
        trash: bool = False,
        from_date: date | None = None,
        to_date: date | None = None,
        trash_type: str = "meeting_recordings",
        meeting_id: str | None = None,
    ) -> ZoomResponse:
        """List all cloud recordings of a user
        HTTP GET /users/{userId}/recordings

        Args:
            user_id: The user ID or email address
            page_size: Number of records returned per page (30-300)
            next_page_token: Next page token for pagination
            mc: Query metadata of the recording
            trash: List recordings from the trash
            from_date: Start date
            to_date: End date
            trash_type: meeting_recordings or recording_file
            meeting_id: Only recordings of this meeting

        Returns:
            ZoomResponse

        """
        _check_choice(
            "trash_type", trash_type, ("meeting_recordings", "recording_file"), "Invalid trash type."
        )
        _check_page_size(page_size)
        return await self._request(
            "GET",
            "/users/{userId}/recordings",
            policy=READ,
            path_params={"userId": user_id},
            query={
                "page_size": page_size,
                "next_page_token": next_page_token,
                "mc": mc,
                "trash": trash,
                "from": _format_date(from_date),
                "to": _format_date(to_date),
                "trash_type": trash_type,
                "meeting_id": meeting_id,
            },
        )

    # ========================================================================
    # CONTACT APIs
    # ========================================================================

    async def search_company_contacts(
        self,
        search_key: str,
        query_presence_status: bool = False,
        page_size: int | None = 1,
        contact_types: int | None = 1,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """Search company contacts
        HTTP GET /contacts
        """
        if page_size and page_size > 7:
            raise ZoomValidationError("Unsupported page size.", parameter="page_size")
        return await self._request(
            "GET",
            "/contacts",
            policy=READ,
            query={
                "search_key": search_key,
                "query_presence_status": query_presence_status,
                "page_size": page_size,
                "contact_types": contact_types,
                "next_page_token": next_page_token,
            },
        )

    async def list_user_contacts(
        self,
        type: str | None = "company",
        page_size: int | None = 10,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """List the current user's contacts
        HTTP GET /chat/users/me/contacts
        """
        if type is not None:
            _check_choice("type", type, ("company", "external"), "Unsupported contact type.")
        if page_size and (page_size < 10 or page_size > 50):
            raise ZoomValidationError("Unsupported page size.", parameter="page_size")
        return await self._request(
            "GET",
            "/chat/users/me/contacts",
            policy=READ,
            query={
                "type": type,
                "page_size": page_size,
                "next_page_token": next_page_token,
            },
        )

    async def get_user_contact_details(
        self,
        contact_id: str,
        query_presence_status: bool = False,
    ) -> ZoomResponse:
        """Get a contact's details
        HTTP GET /chat/users/me/contacts/{contactId}
        """
        return await self._request(
            "GET",
            "/chat/users/me/contacts/{contactId}",
            policy=READ,
            path_params={"contactId": contact_id},
            query={"query_presence_status": query_presence_status},
        )

    # ========================================================================
    # H.323/SIP DEVICE APIs
    # ========================================================================

    async def list_h323_devices(
        self,
        page_size: int = 30,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """List H.323/SIP devices
        HTTP GET /h323/devices
        """
        _check_page_size(page_size)
        return await self._request(
            "GET",
            "/h323/devices",
            policy=READ,
            query={"page_size": page_size, "next_page_token": next_page_token},
        )

    async def create_h323_device(
        self,
        name: str,
        protocol: str,
        ip: str,
        encryption: str = "auto",
    ) -> ZoomResponse:
        """Create an H.323/SIP device
        HTTP POST /h323/devices

        Args:
            name: Device name
            protocol: H.323 or SIP
            ip: Device IP address
            encryption: auto, yes or no

        Returns:
            ZoomResponse

        """
        _check_choice("encryption", encryption, ENCRYPTION_MODES, "Unsupported encryption status.")
        _check_choice("protocol", protocol, DEVICE_PROTOCOLS, "Unsupported device protocol.")
        return await self._request(
            "POST",
            "/h323/devices",
            policy=WRITE,
            body={
                "name": name,
                "protocol": protocol,
                "ip": ip,
                "encryption": encryption,
            },
        )

    async def update_h323_device(
        self,
        device_id: str,
        name: str | None = None,
        protocol: str | None = None,
        ip: str | None = None,
        encryption: str | None = None,
    ) -> ZoomResponse:
        """Update an H.323/SIP device
        HTTP PATCH /h323/devices/{deviceId}
        """
        if encryption:
            _check_choice("encryption", encryption, ENCRYPTION_MODES, "Unsupported encryption status.")
        if protocol:
            _check_choice("protocol", protocol, DEVICE_PROTOCOLS, "Unsupported device protocol.")
        return await self._request(
            "PATCH",
            "/h323/devices/{deviceId}",
            policy=WRITE,
            path_params={"deviceId": device_id},
            body=_compact({
                "name": name,
                "protocol": protocol,
                "ip": ip,
                "encryption": encryption,
            }),
        )

    async def delete_h323_device(self, device_id: str) -> ZoomResponse:
        """Delete an H.323/SIP device
        HTTP DELETE /h323/devices/{deviceId}
        """
        return await self._request(
            "DELETE",
            "/h323/devices/{deviceId}",
            policy=WRITE,
            path_params={"deviceId": device_id},
        )

    # ========================================================================
    # DASHBOARD APIs
    # ========================================================================

    async def list_dashboard_meetings(
        self,
        type: str = "live",
        from_date: date | None = None,
        to_date: date | None = None,
        page_size: int = 30,
        next_page_token: str | None = None,
        tracking_fields: bool = False,
    ) -> ZoomResponse:
        """List live or past meetings
        HTTP GET /metrics/meetings

        Args:
            type: live, pastOne or past
            from_date: Start date (defaults to one day ago)
            to_date: End date (defaults to now)
            page_size: Number of records returned per page (30-300)
            next_page_token: Next page token for pagination
            tracking_fields: Include tracking fields of each meeting

        Returns:
            ZoomResponse

        """
        _check_choice("type", type, ("live", "pastOne", "past"), "Invalid meeting type.")
        from_date, to_date = _default_range(from_date, to_date)
        _check_page_size(page_size)
        return await self._request(
            "GET",
            "/metrics/meetings",
            policy=READ,
            query={
                "type": type,
                "from": _format_date(from_date),
                "to": _format_date(to_date),
                "page_size": page_size,
                "next_page_token": next_page_token,
                "include_fields": "tracking_fields" if tracking_fields else "",
            },
        )

    async def get_dashboard_meeting_details(self, meeting_id: str, type: str = "live") -> ZoomResponse:
        """HTTP GET /metrics/meetings/{meetingId}"""
        _check_choice("type", type, ("live", "pastOne", "past"), "Invalid meeting type.")
        return await self._request(
            "GET",
            "/metrics/meetings/{meetingId}",
            policy=READ,
            path_params={"meetingId": meeting_id},
            query={"type": type},
        )

    async def get_dashboard_meeting_participants(
        self,
        meeting_id: str,
        type: str = "live",
        page_size: int = 30,
        next_page_token: str | None = None,
        registrant_id: bool = False,
    ) -> ZoomResponse:
        """HTTP GET /metrics/meetings/{meetingId}/participants"""
        _check_choice("type", type, ("live", "pastOne", "past"), "Invalid meeting type.")
        _check_page_size(page_size)
        return await self._request(
            "GET",
            "/metrics/meetings/{meetingId}/participants",
            policy=READ,
            path_params={"meetingId": meeting_id},
            query={
                "type": type,
                "page_size": page_size,
                "next_page_token": next_page_token,
                "include_fields": "registrant_id" if registrant_id else "",
            },
        )

    async def get_meeting_participant_qos(
        self,
        meeting_id: str,
        participant_id: str,
        type: str = "live",
    ) -> ZoomResponse:
        """HTTP GET /metrics/meetings/{meetingId}/participants/{participantId}/qos"""
        _check_choice("type", type, LIVE_OR_PAST, "Invalid meeting type.")
        return await self._request(
            "GET",
            "/metrics/meetings/{meetingId}/participants/{participantId}/qos",
            policy=READ,
            path_params={"meetingId": meeting_id, "participantId": participant_id},
            query={"type": type},
        )

    async def list_meeting_participants_qos(
        self,
        meeting_id: str,
        type: str = "live",
        page_size: int = 30,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """HTTP GET /metrics/meetings/{meetingId}/participants/qos"""
        _check_page_size(page_size)
        _check_choice("type", type, LIVE_OR_PAST, "Invalid meeting type.")
        return await self._paged_metrics(
            "/metrics/meetings/{meetingId}/participants/qos",
            {"meetingId": meeting_id}, type, page_size, next_page_token,
        )

    async def get_meeting_sharing_recording_details(
        self,
        meeting_id: str,
        type: str = "live",
        page_size: int = 30,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """HTTP GET /metrics/meetings/{meetingId}/participants/sharing"""
        _check_choice("type", type, LIVE_OR_PAST, "Invalid meeting type.")
        _check_page_size(page_size)
        return await self._paged_metrics(
            "/metrics/meetings/{meetingId}/participants/sharing",
            {"meetingId": meeting_id}, type, page_size, next_page_token,
        )

    async def list_dashboard_webinars(
        self,
        type: str = "live",
        from_date: date | None = None,
        to_date: date | None = None,
        page_size: int = 30,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """List live or past webinars
        HTTP GET /metrics/webinars
        """
        from_date, to_date = _default_range(from_date, to_date)
        _check_page_size(page_size)
        _check_choice("type", type, LIVE_OR_PAST, "Invalid webinar type.")
        return await self._request(
            "GET",
            "/metrics/webinars",
            policy=READ,
            query={
                "type": type,
                "from": _format_date(from_date),
                "to": _format_date(to_date),
                "page_size": page_size,
                "next_page_token": next_page_token,
            },
        )

    async def get_dashboard_webinar_details(self, webinar_id: str, type: str = "live") -> ZoomResponse:
        """HTTP GET /metrics/webinars/{webinarId}"""
        _check_choice("type", type, LIVE_OR_PAST, "Invalid webinar type.")
        return await self._request(
            "GET",
            "/metrics/webinars/{webinarId}",
            policy=READ,
            path_params={"webinarId": webinar_id},
            query={"type": type},
        )

    async def get_dashboard_webinar_participants(
        self,
        webinar_id: str,
        type: str = "live",
        page_size: int = 30,
        next_page_token: str | None = None,
        registrant_id: bool = False,
    ) -> ZoomResponse:
        """HTTP GET /metrics/webinars/{webinarId}/participants"""
        _check_page_size(page_size)
        _check_choice("type", type, LIVE_OR_PAST, "Invalid webinar type.")
        return await self._request(
            "GET",
            "/metrics/webinars/{webinarId}/participants",
            policy=READ,
            path_params={"webinarId": webinar_id},
            query={
                "type": type,
                "page_size": page_size,
                "next_page_token": next_page_token,
                "include_fields": "registrant_id" if registrant_id else "",
            },
        )

    async def get_webinar_participant_qos(
        self,
        webinar_id: str,
        participant_id: str,
        type: str = "live",
    ) -> ZoomResponse:
        """HTTP GET /metrics/webinars/{webinarId}/participants/{participantId}/qos"""
        _check_choice("type", type, LIVE_OR_PAST, "Invalid webinar type.")
        return await self._request(
            "GET",
            "/metrics/webinars/{webinarId}/participants/{participantId}/qos",
            policy=READ,
            path_params={"webinarId": webinar_id, "participantId": participant_id},
            query={"type": type},
        )

    async def list_webinar_participants_qos(
        self,
        webinar_id: str,
        type: str = "live",
        page_size: int = 30,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """HTTP GET /metrics/webinars/{webinarId}/participants/qos"""
        _check_page_size(page_size)
        _check_choice("type", type, LIVE_OR_PAST, "Invalid webinar type.")
        return await self._paged_metrics(
            "/metrics/webinars/{webinarId}/participants/qos",
            {"webinarId": webinar_id}, type, page_size, next_page_token,
        )

    async def get_webinar_sharing_recording_details(
        self,
        webinar_id: str,
        type: str = "live",
        page_size: int = 30,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """HTTP GET /metrics/webinars/{webinarId}/participants/sharing"""
        _check_choice("type", type, LIVE_OR_PAST, "Invalid webinar type.")
        _check_page_size(page_size)
        return await self._paged_metrics(
            "/metrics/webinars/{webinarId}/participants/sharing",
            {"webinarId": webinar_id}, type, page_size, next_page_token,
        )

    async def list_dashboard_zoom_rooms(
        self,
        page_size: int = 30,
        page_number: int | None = None,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """HTTP GET /metrics/zoomrooms"""
        _check_page_size(page_size)
        return await self._request(
            "GET",
            "/metrics/zoomrooms",
            policy=READ,
            query={
                "page_size": page_size,
                "page_number": page_number,
                "next_page_token": next_page_token,
            },
        )

    async def get_zoom_rooms_details(
        self,
        zoom_room_id: str,
        from_date: date | None = None,
        to_date: date | None = None,
        page_size: int = 30,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """HTTP GET /metrics/zoomrooms/{zoomroomId}"""
        return await self._ranged_metrics(
            "/metrics/zoomrooms/{zoomroomId}",
            from_date,
            to_date,
            path_params={"zoomroomId": zoom_room_id},
            page_size=page_size,
            next_page_token=next_page_token,
        )

    async def get_crc_port_usage(
        self,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> ZoomResponse:
        """Cloud Room Connector port usage
        HTTP GET /metrics/crc
        """
        return await self._ranged_metrics("/metrics/crc", from_date, to_date)

    async def get_im_metrics(self) -> ZoomResponse:
        raise ZoomNotImplementedError(
            "Not implemented. IM Metrics is a deprecated Zoom API. You should use Chat Metrics API instead.",
            endpoint="/metrics/im",
        )

    async def get_chat_metrics(
        self,
        from_date: date | None = None,
        to_date: date | None = None,
        page_size: int = 30,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """HTTP GET /metrics/chat"""
        return await self._ranged_metrics(
            "/metrics/chat",
            from_date,
            to_date,
            page_size=page_size,
            next_page_token=next_page_token,
        )

    async def list_meetings_client_feedback(
        self,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> ZoomResponse:
        """HTTP GET /metrics/client/feedback"""
        return await self._ranged_metrics("/metrics/client/feedback", from_date, to_date)

    async def get_top_25_issues_of_zoom_rooms(
        self,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> ZoomResponse:
        """HTTP GET /metrics/zoomrooms/issues"""
        return await self._ranged_metrics("/metrics/zoomrooms/issues", from_date, to_date)

    async def get_top_25_zoom_rooms_with_issues(
        self,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> ZoomResponse:
        """HTTP GET /metrics/issues/zoomrooms"""
        return await self._ranged_metrics("/metrics/issues/zoomrooms", from_date, to_date)

    async def get_issues_of_zoom_rooms(
        self,
        zoom_room_id: str,
        from_date: date | None = None,
        to_date: date | None = None,
        page_size: int = 30,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """HTTP GET /metrics/issues/zoomrooms/{zoomroomId}"""
        return await self._ranged_metrics(
            "/metrics/issues/zoomrooms/{zoomroomId}",
            from_date,
            to_date,
            path_params={"zoomroomId": zoom_room_id},
            page_size=page_size,
            next_page_token=next_page_token,
        )

    async def get_meeting_quality_scores(
        self,
        type: str = "meeting",
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> ZoomResponse:
        """HTTP GET /metrics/quality"""
        _check_choice("type", type, ("meeting", "participants"), "Invalid meeting score type.")
        from_date, to_date = _default_range(from_date, to_date)
        return await self._request(
            "GET",
            "/metrics/quality",
            policy=READ,
            query={
                "from": _format_date(from_date),
                "to": _format_date(to_date),
                "type": type,
            },
        )

    async def get_meetings_client_feedback(
        self,
        feedback_id: str,
        from_date: date | None = None,
        to_date: date | None = None,
        page_size: int = 30,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """HTTP GET /metrics/client/feedback/{feedbackId}"""
        return await self._ranged_metrics(
            "/metrics/client/feedback/{feedbackId}",
            from_date,
            to_date,
            path_params={"feedbackId": feedback_id},
            page_size=page_size,
            next_page_token=next_page_token,
        )

    async def list_client_meeting_satisfaction(
        self,
        from_date: date | None = None,
        to_date: date | None = None,
    ) -> ZoomResponse:
        """HTTP GET /metrics/client/satisfaction"""
        return await self._ranged_metrics("/metrics/client/satisfaction", from_date, to_date)

    async def get_post_meeting_feedback(
        self,
        meeting_id: str,
        type: str = "live",
        page_size: int = 30,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """HTTP GET /metrics/meetings/{meetingId}/participants/satisfaction"""
        _check_page_size(page_size)
        _check_choice("type", type, ("live", "past", "pastOne"), "Invalid meeting type.")
        return await self._paged_metrics(
            "/metrics/meetings/{meetingId}/participants/satisfaction",
            {"meetingId": meeting_id}, type, page_size, next_page_token,
        )

    async def get_post_webinar_feedback(
        self,
        webinar_id: str,
        type: str = "live",
        page_size: int = 30,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """HTTP GET /metrics/webinars/{webinarId}/participants/satisfaction"""
        _check_choice("type", type, LIVE_OR_PAST, "Invalid webinar type.")
        _check_page_size(page_size)
        return await self._paged_metrics(
            "/metrics/webinars/{webinarId}/participants/satisfaction",
            {"webinarId": webinar_id}, type, page_size, next_page_token,
        )

    async def _paged_metrics(
        self,
        path: str,
        path_params: dict[str, Any],
        type: str,
        page_size: int,
        next_page_token: str | None,
    ) -> ZoomResponse:
        return await self._request(
            "GET",
            path,
            policy=READ,
            path_params=path_params,
            query={
                "type": type,
                "page_size": page_size,
                "next_page_token": next_page_token,
            },
        )

    async def _ranged_metrics(
        self,
        path: str,
        from_date: date | None,
        to_date: date | None,
        path_params: dict[str, Any] | None = None,
        page_size: int | None = None,
        next_page_token: str | None = None,
    ) -> ZoomResponse:
        """GET a dashboard report over a date range (default: the last 24 hours)."""
        from_date, to_date = _default_range(from_date, to_date)
        if page_size is not None:
            _check_page_size(page_size)
        return await self._request(
            "GET",
            path,
            policy=READ,
            path_params=path_params,
            query={
                "page_size": page_size,
                "next_page_token": next_page_token,
                "from": _format_date(from_date),
                "to": _format_date(to_date),
            },
        )

    # ========================================================================
    # PAC APIs
    # ========================================================================

    async def list_user_pac_accounts(self, user_id: str) -> ZoomResponse:
        """List a user's Personal Audio Conference accounts
        HTTP GET /users/{userId}/pac
        """
        return await self._request(
            "GET",
            "/users/{userId}/pac",
            policy=READ,
            path_params={"userId": user_id},
        )

    # ========================================================================
    # REPORT APIs
    # ========================================================================

    async def get_daily_usage_report(self, year: int, month: int) -> ZoomResponse:
        """Daily usage report for one month
        HTTP GET /report/daily

        Args:
            year: Year of the report
            month: Month of the report (1-12)

        Returns:
            ZoomResponse

        """
        if month < 1 or month > 12:
            raise ZoomValidationError("Invalid month.", parameter="month")
        return await self._request(
            "GET",
            "/report/daily",
            policy=READ,
            query={"year": year, "month": month},
        )

    # ========================================================================
    # ZOOM ROOMS ACCOUNT APIs
    # ========================================================================

    async def get_zoom_room_account_profile(self) -> ZoomResponse:
        """HTTP GET /rooms/account_profile"""
        return await self._request("GET", "/rooms/account_profile", policy=READ)

    async def update_zoom_room_account_profile(
        self,
        support_email: str | None = None,
        support_phone: str | None = None,
        room_passcode: str | None = None,
        required_code_to_ext: bool | None = None,
    ) -> ZoomResponse:
        """Update the Zoom Rooms account profile
        HTTP PATCH /rooms/account_profile

        Args:
            support_email: Support email shown on Zoom Rooms
            support_phone: Support phone number
            room_passcode: Passcode used to leave a Zoom Room (1-16 characters)
            required_code_to_ext: Require the passcode to exit a Zoom Room

        Returns:
            ZoomResponse

        """
        if room_passcode:
            if len(room_passcode) > 16:
                raise ZoomValidationError("Room passcode is too long.", parameter="room_passcode")
        elif room_passcode is not None:
            raise ZoomValidationError("Room passcode is too short.", parameter="room_passcode")
        basic = _compact({
            "support_email": support_email,
            "support_phone": support_phone,
            "room_passcode": room_passcode,
            "required_code_to_ext": required_code_to_ext,
        })
        return await self._request(
            "PATCH",
            "/rooms/account_profile",
            policy=WRITE,
            body={"basic": basic},
        )

    async def get_zoom_room_account_settings(self, setting_type: str = "meeting") -> ZoomResponse:
        """HTTP GET /rooms/account_settings"""
        _check_choice(
            "setting_type",
            setting_type,
            ROOM_SETTING_TYPES,
            "Unsupported type of setting to retrieve.",
        )
        return await self._request(
            "GET",
            "/rooms/account_settings",
            policy=READ,
            query={"setting_type": setting_type},
        )

    async def update_zoom_room_account_settings(
        self,
        setting_type: str,
        data: dict[str, Any],
    ) -> ZoomResponse:
        """HTTP PATCH /rooms/account_settings"""
        _check_choice("setting_type", setting_type, ROOM_SETTING_TYPES, "Unsupported type of setting to update.")
        return await self._request(
            "PATCH",
            "/rooms/account_settings",
            policy=WRITE,
            query={"setting_type": setting_type},
            body=data,
        )

    # ========================================================================
    # ZOOM ROOMS DEVICE APIs
    # ========================================================================

    async def change_zoom_rooms_app_version(
        self,
        room_id: str,
        device_id: str,
        action: str,
    ) -> ZoomResponse:
        """Upgrade, downgrade or cancel an app version change on a Zoom Rooms device
        HTTP PUT /rooms/{roomId}/devices/{deviceId}/app_version
        """
        _check_choice(
            "action",
            action,
            ("upgrade", "downgrade", "cancel"),
            "Unsupported Zoom Rooms device action.",
        )
        return await self._request(
            "PUT",
            "/rooms/{roomId}/devices/{deviceId}/app_version",
            policy=WRITE,
            path_params={"roomId": room_id, "deviceId": device_id},
            body={"action": action},
        )


# ---- Helpers used by endpoint methods ----
def _check_page_size(page_size: int, minimum: int = 30, maximum: int = 300) -> None:
    if page_size < minimum or page_size > maximum:
        raise ZoomValidationError(
            f"Page size is minimum {minimum}, maximum {maximum} results.",
            parameter="page_size",
        )


def _check_choice(name: str, value: Any, choices: Iterable[Any], message: str) -> None:
    if value not in choices:
        raise ZoomValidationError(message, parameter=name)


def _drop_none(d: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in d.items() if v is not None}


def _compact(d: dict[str, Any]) -> dict[str, Any]:
    """Drop unset (falsy) fields from a partial-update body."""
    return {k: v for k, v in d.items() if v}


def _to_utc(value: datetime) -> datetime:
    # naive datetimes are taken to be UTC already
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _format_datetime(value: datetime) -> str:
    return _to_utc(value).strftime("%Y-%m-%dT%H:%M:%SZ")


def _format_date(value: date | None) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        value = _to_utc(value)
    return value.strftime("%Y-%m-%d")


def _default_range(from_date: date | None, to_date: date | None) -> tuple[date, date]:
    now = datetime.now(timezone.utc)
    return from_date or now - timedelta(days=1), to_date or now
