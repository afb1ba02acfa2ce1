"""
Broker template catalog.

One entry per transportation broker / payer manifest layout, in the order
the template picker shows them.  Columns are listed in file order; a
``(column, attribute)`` pair maps the column onto the canonical row, a bare
string keeps the column in the raw snapshot only.

Some exports repeat a header (e.g. Ride2MD prints ``ZipCode`` for both the
pickup and the drop-off stop).  The parser suffixes repeats as ``_1``,
``_2``…, so the second occurrence is listed here under that name.
"""

from __future__ import annotations

from tripflow.importer.templates.base import BrokerTemplate, TemplateField, template

_STREET_MILES_TRIP = [
    ("MemberName", "patient_full_name"),
    ("PickUpTime", "pickup_time"),
    ("PickUpStreet", "pickup_address"),
    ("DropOffStreet", "dropoff_address"),
    ("Miles", "distance_miles"),
]

_BOOKING_ORIGIN_DESTINATION = [
    ("Booking Id", "trip_id"),
    ("Client Name", "patient_full_name"),
    ("Pickup Time", "pickup_time"),
    ("Appt Time", "appointment_time"),
    ("Origin", "pickup_address"),
    ("Destination", "dropoff_address"),
    ("Direct Distance", "distance_miles"),
]

_COMFORT_CARE_V2 = [
    "Space Types",
    ("Booking Id", "trip_id"),
    ("Client Name", "patient_full_name"),
    ("Phone Pickup", "pickup_phone"),
    ("Comments", "notes"),
    ("Pickup Time", "pickup_time"),
    ("Appointment Time", "appointment_time"),
    ("Site Name(orig)", "pickup_location_name"),
    ("Origin", "pickup_address"),
    ("Site Name(dest)", "dropoff_location_name"),
    ("Destination", "dropoff_address"),
    ("Direct Distance", "distance_miles"),
    ("Mobility Aids", "mobility_needs"),
]

_RIDE_DATE_FIRST_LAST = [
    ("Ride ID", "trip_id"),
    ("Ride Date", "trip_date"),
    ("First Name", "patient_first_name"),
    ("Last Name", "patient_last_name"),
    ("Phone", "patient_phone"),
    ("Pick Up Time", "pickup_time"),
    ("Pickup Address", "pickup_address"),
    ("Dropoff Address", "dropoff_address"),
    ("Estimated Distance", "distance_miles"),
]

_MEMBER_SCHEDULED_PICKUP = [
    ("Member Name", "patient_full_name"),
    ("Scheduled Pickup Date", "trip_date"),
    ("Pickup Address", "pickup_address"),
    ("Drop-off Address", "dropoff_address"),
    ("Phone Number", "patient_phone"),
    ("Miles", "distance_miles"),
]

_PROMISED_PICKUP_STOPS = [
    ("Trip Date", "trip_date"),
    ("Promised Pick-up Time", "pickup_time"),
    ("Pick-up Street", "pickup_address"),
    ("Pick-up City", "pickup_city"),
    ("Pick-up ZIP", "pickup_zip"),
    ("Drop-off Street", "dropoff_address"),
    ("Drop-off City", "dropoff_city"),
    ("Drop-off ZIP", "dropoff_zip"),
]

_MTM_STOPS = [
    ("Pickup Address", "pickup_address"),
    ("Pickup City", "pickup_city"),
    ("Pickup Zip Code", "pickup_zip"),
    ("Delivery Address", "dropoff_address"),
    ("Delivery City", "dropoff_city"),
    ("Delivery Zip Code", "dropoff_zip"),
    ("Trip Mileage", "distance_miles"),
]


BROKER_TEMPLATES: list[BrokerTemplate] = [
    template("access_2_care_template", [
        "Business Unit Identifier",
        ("Trip Number", "trip_number"),
        "Resource",
        ("Name", "patient_full_name"),
        ("Member DOB", "patient_dob"),
        ("Member Weight", "patient_weight"),
        ("Case Number", "case_number"),
        ("Pickup Address", "pickup_address"),
        ("Pickup Address 2", "pickup_address_2"),
        ("Member Phone", "patient_phone"),
        ("Pickup County", "pickup_county"),
        ("Vehicle Type", "vehicle_type"),
        ("Special Needs", "special_needs"),
        "Directions",
        ("Destination Name", "dropoff_location_name"),
        ("Destination Phone", "dropoff_phone"),
        ("Destination Address", "dropoff_address"),
        ("Destination Address 2", "dropoff_address_2"),
        ("Additional Passenger Count", "passenger_count"),
        ("Additional Passenger", "additional_passengers"),
        ("Trip Date", "trip_date"),
        ("Appointment Time", "appointment_time"),
        ("Pickup Time", "pickup_time"),
        ("Mileage", "distance_miles"),
        ("Provider Notes", "notes"),
        "Pharmacy Stop Auth",
        ("Wheelchair", "wheelchair"),
        "High Risk",
        ("Confirmation Number", "confirmation_number"),
    ]),
    template("access_2_care_v2_template", [
        ("Trip Number", "trip_number"),
        ("Rider ID:Name", "patient_member_id"),
        ("Firstname", "patient_first_name"),
        ("Lastname", "patient_last_name"),
        ("Member DOB", "patient_dob"),
        ("Pickup Address 1", "pickup_address"),
        ("Pickup City", "pickup_city"),
        ("Pickup State", "pickup_state"),
        ("Pickup Zip Code", "pickup_zip"),
        ("Destination Address 1", "dropoff_address"),
        ("Destination City", "dropoff_city"),
        ("Destination State", "dropoff_state"),
        ("Destination Zip Code", "dropoff_zip"),
        ("Trip Date", "trip_date"),
        ("Appointment Time", "appointment_time"),
        ("Pickup Time", "pickup_time"),
        ("Mileage", "distance_miles"),
        ("All Notes & Special Needs", "notes"),
    ]),
    template("alivi_template_e6WxRcj", ["payorId"]),
    template("american_logistics_template", [
        ("Bolt Trip ID", "trip_id"),
        ("Pickup Address", "pickup_address"),
        ("Pickup City", "pickup_city"),
        ("Pickup State", "pickup_state"),
        ("Pickup Zip", "pickup_zip"),
        ("Pickup Time", "pickup_time"),
        ("Dropoff Address", "dropoff_address"),
        ("Dropoff City", "dropoff_city"),
        ("Dropoff State", "dropoff_state"),
        ("Dropoff Zip", "dropoff_zip"),
        ("Passenger Name", "patient_full_name"),
        ("Passenger Phone Number", "patient_phone"),
    ]),
    template("blue_grass_template", [
        ("CustomerFirstName", "patient_first_name"),
        ("CustomerLastName", "patient_last_name"),
        ("OriginStopAddress", "pickup_address"),
        ("OriginStopCity", "pickup_city"),
        ("OriginStopState", "pickup_state"),
        ("OriginStopZip", "pickup_zip"),
        ("DestAddress", "dropoff_address"),
        ("DestCity", "dropoff_city"),
        ("DestState", "dropoff_state"),
        ("DestZip", "dropoff_zip"),
        ("Pickup", "trip_date"),
    ]),
    template("call_the_car_template", [
        ("Trip ID", "trip_id"),
        ("First Name", "patient_first_name"),
        ("Last Name", "patient_last_name"),
        ("Date of Service", "trip_date"),
        ("Appointment Time", "appointment_time"),
        ("Pickup Time", "pickup_time"),
        ("Origin Street", "pickup_address"),
        ("Origin City", "pickup_city"),
        ("Destination Street", "dropoff_address"),
        ("Destination City", "dropoff_city"),
        ("Miles", "distance_miles"),
        ("Date Of Birth", "patient_dob"),
    ]),
    template("cata_template", _BOOKING_ORIGIN_DESTINATION),
    template("childrens_services_template", [
        ("Trip ID", "trip_id"),
        ("Pick Up Date", "trip_date"),
        ("Pick Up Time", "pickup_time"),
        ("Appointment Time", "appointment_time"),
        ("Client Name", "patient_full_name"),
        ("Client DOB", "patient_dob"),
        ("Pick Up Address", "pickup_address"),
        ("Pick Up City", "pickup_city"),
        ("Drop Off Address", "dropoff_address"),
        ("Drop Off City", "dropoff_city"),
        ("Est Miles", "distance_miles"),
    ]),
    template("comfort_care_template", [
        ("Order Number", "trip_number"),
        ("Client Name", "patient_full_name"),
        ("PU_Time", "pickup_time"),
        ("PU Address", "pickup_address"),
        ("PU city", "pickup_city"),
        ("PU Zip", "pickup_zip"),
        ("DO Address", "dropoff_address"),
        ("DO City", "dropoff_city"),
        ("DO ZIP", "dropoff_zip"),
        ("Miles", "distance_miles"),
    ]),
    template("comfort_care_v2_app_time_template", _COMFORT_CARE_V2),
    template("comfort_care_v2_template", _COMFORT_CARE_V2),
    template("community_action_template", [
        ("Consumer Name", "patient_full_name"),
        ("DOB", "patient_dob"),
        ("Address", "pickup_address"),
        ("Phone", "patient_phone"),
        ("Start time", "pickup_time"),
        ("Date", "trip_date"),
        ("Miles", "distance_miles"),
        ("Destination", "dropoff_address"),
    ]),
    template("cts_template", _BOOKING_ORIGIN_DESTINATION),
    template("custom_template", [
        ("Last Name", "patient_last_name"),
        ("First Name", "patient_first_name"),
        ("Time", "pickup_time"),
        ("Address", "pickup_address"),
        ("City", "pickup_city"),
        ("State", "pickup_state"),
        ("Zip Code", "pickup_zip"),
        ("Home Phone", "patient_phone"),
        ("Location", "dropoff_address"),
        "Payer Type",
        ("Start Date", "trip_date"),
        "6 Month",
        "1 Year",
    ]),
    template("dhs_template", [
        ("Trip Date", "trip_date"),
        ("Trip Id", "trip_id"),
        ("Appt Time", "appointment_time"),
        ("Client Name", "patient_full_name"),
        ("Pickup Address1", "pickup_address"),
        ("Pickup City", "pickup_city"),
        ("Pickup State", "pickup_state"),
        ("Pickup Zip", "pickup_zip"),
        ("Destination Address1", "dropoff_address"),
        ("Destination City", "dropoff_city"),
        ("Destination State", "dropoff_state"),
        ("Destination Zip", "dropoff_zip"),
    ]),
    template("ect_template", _STREET_MILES_TRIP),
    template("fact_template", [
        ("Passenger Name", "patient_full_name"),
        ("Passenger Phone", "patient_phone"),
        ("Promised Pick-up Time", "pickup_time"),
        ("Appointment Time", "appointment_time"),
        ("Pick-up Street", "pickup_address"),
        ("Drop-off Street", "dropoff_address"),
        ("Trip Date", "trip_date"),
        ("Trip ID", "trip_id"),
    ]),
    template("federated_template", [
        ("CustomerFirstName", "patient_first_name"),
        ("CustomerLastName", "patient_last_name"),
        ("OriginStopAddress", "pickup_address"),
        ("DestAddress", "dropoff_address"),
        ("PU Time", "pickup_time"),
        ("TripID", "trip_id"),
    ]),
    template("fidelis_template", [
        ("First name", "patient_first_name"),
        ("Last name", "patient_last_name"),
        ("DOB", "patient_dob"),
        ("PU address", "pickup_address"),
        ("Phone", "patient_phone"),
        ("Service date", "trip_date"),
        ("PU time", "pickup_time"),
        ("Destination info", "dropoff_address"),
    ]),
    template("fist_transit_template", [
        ("Client Name", "patient_full_name"),
        ("Requested Time Pickup", "pickup_time"),
        ("Appt Time", "appointment_time"),
        ("Origin", "pickup_address"),
        ("Destination", "dropoff_address"),
        ("Booking Id", "trip_id"),
    ]),
    template("fresno_pace_template", [
        ("Date", "trip_date"),
        ("Time", "pickup_time"),
        ("Name", "patient_full_name"),
        ("Address", "pickup_address"),
        ("Zip Code", "pickup_zip"),
        ("Phone", "patient_phone"),
        ("Chief Complaint", "special_needs"),
    ]),
    template("gatra_template", [
        ("Name", "patient_full_name"),
        ("Phone", "patient_phone"),
        ("Date", "trip_date"),
        ("P/U Time", "pickup_time"),
        ("Appt.Time", "appointment_time"),
        ("P/U Address/Entrance", "pickup_address"),
        ("P/U City", "pickup_city"),
        ("Drop Address/Entrance", "dropoff_address"),
        ("Drop City", "dropoff_city"),
        ("Miles", "distance_miles"),
    ]),
    template("grits_template", [
        ("CustomerFirstName", "patient_first_name"),
        ("CustomerLastName", "patient_last_name"),
        ("RequestTime", "pickup_time"),
        ("OriginStopAddress", "pickup_address"),
        ("OriginStopCity", "pickup_city"),
        ("OriginStopZip", "pickup_zip"),
        ("DestCommonName", "dropoff_location_name"),
        ("DestAddress", "dropoff_address"),
        ("DestCity", "dropoff_city"),
        ("DestZip", "dropoff_zip"),
    ]),
    template("health_partners_template", [
        ("rideDate", "trip_date"),
        ("primaryRiderLastName", "patient_last_name"),
        ("primaryRiderFirstName", "patient_first_name"),
        ("pickupDate", "pickup_time"),
        ("appointmentDate", "appointment_time"),
        ("fromStreet1", "pickup_address"),
        ("fromCity", "pickup_city"),
        ("fromZip", "pickup_zip"),
        ("toStreet1", "dropoff_address"),
        ("toCity", "dropoff_city"),
        ("toZip", "dropoff_zip"),
    ]),
    template("hybrid_it_template", [
        ("Trip #", "trip_number"),
        ("Patient Name", "patient_full_name"),
        ("Pick Up Address", "pickup_address"),
        ("Drop Address", "dropoff_address"),
        ("Trip Miles", "distance_miles"),
        ("Appointment Date", "trip_date"),
        ("Appointment Time", "appointment_time"),
        ("Patient Phone", "patient_phone"),
    ]),
    template("intelliride_template", [
        ("First Name", "patient_first_name"),
        ("Last Name", "patient_last_name"),
        ("Date of Birth", "patient_dob"),
        ("Passenger Phone", "patient_phone"),
        ("Trip ID", "trip_id"),
        *_PROMISED_PICKUP_STOPS,
        ("Direct Estimated Distance", "distance_miles"),
    ]),
    template("isi_template", [
        ("Client DOB (mm/dd/yyyy)", "patient_dob"),
        ("Client's First Name", "patient_first_name"),
        ("Client's Last Name", "patient_last_name"),
        ("Phone number", "patient_phone"),
        ("Date of service", "trip_date"),
        ("Appointment time", "appointment_time"),
        ("Pick up time", "pickup_time"),
        ("PU address", "pickup_address"),
        ("DO address", "dropoff_address"),
    ]),
    template("kaizen_template", _RIDE_DATE_FIRST_LAST),
    template("laneco_template", _RIDE_DATE_FIRST_LAST),
    template("lklp_template", [
        ("CustomerFirstName", "patient_first_name"),
        ("CustomerLastName", "patient_last_name"),
        ("OriginStopAddress", "pickup_address"),
        ("OriginStopCity", "pickup_city"),
        ("OriginStopZip", "pickup_zip"),
        ("RequestTime", "pickup_time"),
        ("Telephone1", "patient_phone"),
        ("DestAddress", "dropoff_address"),
        ("StartDateTime", "trip_date"),
    ]),
    template("logisticare_template", [
        ("Date of trip", "trip_date"),
        ("Name", "patient_full_name"),
        ("Address 1", "pickup_address"),
        ("City", "pickup_city"),
        ("State", "pickup_state"),
        ("Zip code", "pickup_zip"),
        ("Time of pickup", "pickup_time"),
        ("Drop off address 1", "dropoff_address"),
        ("DO Zip code", "dropoff_zip"),
        ("Appointment time", "appointment_time"),
        ("DOB", "patient_dob"),
    ]),
    template("metro_access_template", [
        ("Date", "trip_date"),
        ("P/U Time", "pickup_time"),
        ("Customer Name", "patient_full_name"),
        ("Pick-Up Address", "pickup_address"),
        ("Pick-Up City", "pickup_city"),
        ("Pick-Up Zip Code", "pickup_zip"),
        ("Drop-Off Address", "dropoff_address"),
        ("Drop-Off City", "dropoff_city"),
        ("Drop-Off Zip Code", "dropoff_zip"),
    ]),
    template("mtba_1_template", [
        ("PU Date/Time", "pickup_time"),
        ("Passenger Name", "patient_full_name"),
        ("Passenger Phone", "patient_phone"),
        ("PU Address", "pickup_address"),
        ("DO Address", "dropoff_address"),
    ]),
    template("mtba_3_5_template", [
        ("Fare #", "trip_number"),
        ("PU Date/Time", "pickup_time"),
        "Fleet",
        ("Passenger Name", "patient_full_name"),
        ("Passenger Phone", "patient_phone"),
        ("PU Address", "pickup_address"),
        "PU Zone",
        ("PU County", "pickup_county"),
        ("DO Address", "dropoff_address"),
        "DO Zone",
        ("DO County", "dropoff_county"),
        ("Veh Type", "vehicle_type"),
        "Drv Type",
        "Assigned",
        "Driver #",
        ("Remarks", "notes"),
    ]),
    template("mtba_3_template", [
        ("resnumber", "trip_number"),
        "Type",
        ("DueTime", "pickup_time"),
        ("VehTypes", "vehicle_type"),
        "DriverTypes",
        ("AppointmentTime", "appointment_time"),
        "fleet",
        "DriverID",
        "taxi",
        ("PassengerCount", "passenger_count"),
        "AccountNumber",
        "AccountName",
        "SubAccount",
        ("Pickup_Name", "patient_full_name"),
        ("Phone", "patient_phone"),
        ("Pickup_CityName", "pickup_city"),
        ("Dest_CityName", "dropoff_city"),
        ("distance", "distance_miles"),
        "Pickup_StreetNumber",
        ("Pickup_StreetName", "pickup_address"),
        ("Pickup_zipcode", "pickup_zip"),
        ("Apt", "pickup_address_2"),
        "Dest_StreetNumber",
        ("Dest_StreetName", "dropoff_address"),
        ("Dest_zipcode", "dropoff_zip"),
        ("Remark1", "notes"),
    ]),
    template("mtm_template", [
        ("Member's Last Name", "patient_last_name"),
        ("Member's First Name", "patient_first_name"),
        ("Appointment Date", "trip_date"),
        ("Appointment Time", "appointment_time"),
        *_MTM_STOPS,
    ]),
    template("mtm_v2_template", [
        ("Member's First Name", "patient_first_name"),
        ("Member's Last Name", "patient_last_name"),
        ("Appointment Date", "trip_date"),
        ("Time", "pickup_time"),
        *_MTM_STOPS,
    ]),
    template("nmt_template", [
        ("FirstName", "patient_first_name"),
        ("LastName", "patient_last_name"),
        ("PickupDate", "trip_date"),
        ("PickupScheduleTime", "pickup_time"),
        ("AppointmentTime", "appointment_time"),
        ("OriginAddress", "pickup_address"),
        ("OriginCity", "pickup_city"),
        ("OriginZip", "pickup_zip"),
        ("DestinationAddress", "dropoff_address"),
        ("DestinationCity", "dropoff_city"),
        ("DestinationZip", "dropoff_zip"),
    ]),
    template("oak_template", [
        ("Date", "trip_date"),
        ("Requested Time", "pickup_time"),
        ("Pick-Up Location", "pickup_address"),
        ("Drop-Off Location", "dropoff_address"),
        ("PatientName", "patient_full_name"),
        ("DOB", "patient_dob"),
        ("PrimaryPhone", "patient_phone"),
    ]),
    template("one_call_template", [
        ("FirstName", "patient_first_name"),
        ("LastName", "patient_last_name"),
        ("TripDate", "trip_date"),
        ("PickupAddress", "pickup_address"),
        ("PickupCity", "pickup_city"),
        ("PickupZip", "pickup_zip"),
        ("DropoffAddress", "dropoff_address"),
        ("DropoffCity", "dropoff_city"),
        ("DropoffZip", "dropoff_zip"),
        ("PickupTime", "pickup_time"),
    ]),
    template("one_call_wc_template", [
        ("Order ID", "trip_id"),
        ("Assignment ID", "authorization_number"),
        ("Claimant's First Name", "patient_first_name"),
        ("Claimant's Last Name", "patient_last_name"),
        ("Claimant's Ph Number", "patient_phone"),
        ("Scheduled Pick-up Date", "trip_date"),
        ("Scheduled Pick-up Time", "pickup_time"),
        ("Appointment Date", "appointment_time"),
        "Appointment Time",
        ("Pickup Address Name", "pickup_location_name"),
        ("From Address", "pickup_address"),
        ("From City", "pickup_city"),
        ("From State", "pickup_state"),
        ("From Zip Code", "pickup_zip"),
        ("Dropoff Address Name", "dropoff_location_name"),
        ("To Address", "dropoff_address"),
        ("To City", "dropoff_city"),
        ("To State", "dropoff_state"),
        ("To Zip Code", "dropoff_zip"),
        ("Distance", "distance_miles"),
        ("Notes to Driver", "notes"),
    ]),
    template("pace_template", [
        ("ClientName", "patient_full_name"),
        ("Origin street", "pickup_address"),
        ("Origin City", "pickup_city"),
        ("Dest Street", "dropoff_address"),
        ("Dest city", "dropoff_city"),
        ("Sched Time", "pickup_time"),
        ("Appt Time", "appointment_time"),
    ]),
    template("priority_health_template", [
        ("Member First Name", "patient_first_name"),
        ("Member Last Name", "patient_last_name"),
        ("DOB", "patient_dob"),
        ("Member Phone Number", "patient_phone"),
        ("Pickup Address", "pickup_address"),
        ("Pickup City", "pickup_city"),
        ("Pickup State", "pickup_state"),
        ("Pickup Zip", "pickup_zip"),
        ("Appointment Date and Time", "appointment_time"),
    ]),
    template("provide_a_ride_template", [
        ("Date", "trip_date"),
        ("Name", "patient_full_name"),
        ("Phone Number", "patient_phone"),
        ("Earliest Pickup", "pickup_time"),
        "Latest Pickup",
        ("org. Street 1", "pickup_address"),
        ("org. City", "pickup_city"),
        ("org. Zip Code", "pickup_zip"),
        ("dst. Street 1", "dropoff_address"),
        ("dst. City", "dropoff_city"),
        ("dst. Zip Code", "dropoff_zip"),
        ("Miles", "distance_miles"),
    ]),
    template("ride_2_md_template", [
        "Check",
        "Provider Reservation",
        "Validation messages",
        "Error",
        "Company",
        ("Vehicle Code", "vehicle_type"),
        "Provider Status",
        "Status",
        ("Special Req", "special_needs"),
        "Service Animal",
        "Driver",
        "Driver Phone",
        ("Rider", "patient_full_name"),
        ("Rider Phone", "patient_phone"),
        "Age",
        ("Rider Id", "patient_member_id"),
        "Payor",
        "Depot",
        "Service",
        "R. For Transport",
        ("Transport Date", "trip_date"),
        "Leg",
        ("Appointment", "appointment_time"),
        ("PU Time", "pickup_time"),
        "ActualPU",
        ("Address", "pickup_address"),
        ("City", "pickup_city"),
        ("ZipCode", "pickup_zip"),
        ("Phone", "pickup_phone"),
        ("Geo County", "pickup_county"),
        ("Actual Drop Address", "dropoff_address"),
        ("Actual Drop City", "dropoff_city"),
        ("ZipCode_1", "dropoff_zip"),
        ("Phone_1", "dropoff_phone"),
        ("Geo County_1", "dropoff_county"),
        ("Loaded Miles", "distance_miles"),
        ("Authorization", "authorization_number"),
        ("Companions", "escorts"),
        "VIP",
        "Confirmed",
        "SO",
    ]),
    template("ride_2_md_update_template_ZPcwMym", [
        ("Rider", "patient_full_name"),
        ("Rider Phone", "patient_phone"),
        "PU",
        ("DOB", "patient_dob"),
        "Age",
        ("Rider Id", "patient_member_id"),
        "Payor",
        "Pref. Prov.",
        "Service",
        "R. For Transport",
        ("Transport Date", "trip_date"),
        "Leg",
        ("Appointment", "appointment_time"),
        "Act Time",
        ("PU Time", "pickup_time"),
        "ActualPU",
        ("Address", "pickup_address"),
        ("City", "pickup_city"),
        ("State", "pickup_state"),
        ("ZipCode", "pickup_zip"),
        ("Pick-Up Location", "pickup_location_name"),
        ("Latitude", "pickup_latitude"),
        ("Longitud", "pickup_longitude"),
        ("Phone", "pickup_phone"),
        "Alternate Phone",
        "Home Phone",
        ("Geo County", "pickup_county"),
        ("Apt/Ste/Rm", "pickup_address_2"),
        ("Actual Drop Address", "dropoff_address"),
        ("Actual Drop City", "dropoff_city"),
        ("State_1", "dropoff_state"),
        ("ZipCode_1", "dropoff_zip"),
        ("Drop-Off Location", "dropoff_location_name"),
        ("Latitude_1", "dropoff_latitude"),
        ("Longitud_1", "dropoff_longitude"),
        ("Phone_1", "dropoff_phone"),
        "Alternate Phone_1",
        "Home Phone_1",
        ("Geo County_1", "dropoff_county"),
        ("Apt/Ste/Rm_1", "dropoff_address_2"),
        ("Loaded Miles", "distance_miles"),
        ("Authorization", "authorization_number"),
    ]),
    template("ride_to_care_template", [
        ("First Name", "patient_first_name"),
        ("Last Name", "patient_last_name"),
        *_PROMISED_PICKUP_STOPS,
        ("Passenger Phone", "patient_phone"),
    ]),
    template("route_genie_template", [
        ("Passenger DOB", "patient_dob"),
        ("Passenger First Name", "patient_first_name"),
        ("Passenger Last Name", "patient_last_name"),
        ("Phone Number", "patient_phone"),
        ("PU Address", "pickup_address"),
        ("DO Address", "dropoff_address"),
        ("Date of service", "trip_date"),
        ("Appointment time", "appointment_time"),
        ("Pick up time", "pickup_time"),
    ]),
    template("safe_ride_health_template", [
        ("patientFirstName", "patient_first_name"),
        ("patientLastName", "patient_last_name"),
        ("dateOfBirth", "patient_dob"),
        ("patientPhoneNumber", "patient_phone"),
        ("pickupTime", "pickup_time"),
        ("appointmentTime", "appointment_time"),
        ("fromAddress", "pickup_address"),
        ("toAddress", "dropoff_address"),
    ]),
    template("safe_ride_template", [*_STREET_MILES_TRIP, ("TripID", "trip_id")]),
    template("sms_template", [
        ("Appt Date", "trip_date"),
        ("Appt Time", "appointment_time"),
        ("Origin Address", "pickup_address"),
        ("Origin City", "pickup_city"),
        ("Destination Address", "dropoff_address"),
        ("Destination City", "dropoff_city"),
        ("Passenger Name", "patient_full_name"),
    ]),
    template("south_east_trans_template", [*_STREET_MILES_TRIP, ("TripID", "trip_id")]),
    template("tennesse_template", [*_STREET_MILES_TRIP, ("DateOfBirth", "patient_dob")]),
    template("transcita_template_rStdQGa", [
        ("FirstName", "patient_first_name"),
        ("LastName", "patient_last_name"),
        ("BirthDate", "patient_dob"),
        ("MobilePhone", "patient_phone"),
        "Payer",
        ("PU address", "pickup_address"),
        ("DO address", "dropoff_address"),
        ("PU Date", "trip_date"),
        ("Pick-Up", "pickup_time"),
        ("Appt Time", "appointment_time"),
        ("Notes", "notes"),
    ]),
    template("transdev_template", [
        ("First Name", "patient_first_name"),
        ("Last Name", "patient_last_name"),
        ("Date of Birth", "patient_dob"),
        *_PROMISED_PICKUP_STOPS,
    ]),
    template("va_template", [
        ("Trip", "trip_number"),
        ("Date&Time", "pickup_time"),
        ("Pick-up Address", "pickup_address"),
        ("Drop-off address", "dropoff_address"),
        "Est Cost",
        ("Est Distance", "distance_miles"),
    ]),
    template("vamc_template_hFqo1K4", [
        ("Pickup Date", "trip_date"),
        ("Pick Up Time", "pickup_time"),
        ("Patient Name", "patient_full_name"),
        ("Address", "pickup_address"),
        ("Destination", "dropoff_address"),
        ("Phone Number", "patient_phone"),
    ]),
    template("vet_ride_template", [
        ("Trip ID", "trip_id"),
        ("Passenger", "patient_full_name"),
        ("Phone Number", "patient_phone"),
        ("Estimated Pickup Time", "pickup_time"),
        ("Appointment Time", "appointment_time"),
        ("Pickup Address", "pickup_address"),
        ("Dropoff Address", "dropoff_address"),
        ("Estimated Distance", "distance_miles"),
    ]),
    template("veyo_template", _MEMBER_SCHEDULED_PICKUP),
    template("veyo_v2_template", _MEMBER_SCHEDULED_PICKUP),
    template("future_nemt_template", [
        TemplateField("Patient First Name", True, "patient_first_name"),
        TemplateField("Patient Last Name", True, "patient_last_name"),
        TemplateField("Patient Phone", False, "patient_phone"),
        TemplateField("Patient DOB", False, "patient_dob"),
        TemplateField("Pickup Address", True, "pickup_address"),
        TemplateField("Pickup City", False, "pickup_city"),
        TemplateField("Pickup State", False, "pickup_state"),
        TemplateField("Pickup Zip", False, "pickup_zip"),
        TemplateField("Dropoff Address", True, "dropoff_address"),
        TemplateField("Dropoff City", False, "dropoff_city"),
        TemplateField("Dropoff State", False, "dropoff_state"),
        TemplateField("Dropoff Zip", False, "dropoff_zip"),
        TemplateField("Trip Date", True, "trip_date"),
        TemplateField("Pickup Time", False, "pickup_time"),
        TemplateField("Appointment Time", False, "appointment_time"),
        TemplateField("Trip Type", False, "trip_type", "one_way or round_trip"),
        TemplateField("Distance (Miles)", False, "distance_miles"),
        TemplateField("Duration (Minutes)", False, "duration_minutes"),
        TemplateField("Notes", False, "notes"),
    ], display_name="future_nemt_transportation_template"),
]
