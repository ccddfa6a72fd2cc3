# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
EXIF tag definitions

Static tag id to name tables for the three directory kinds a JPEG EXIF
segment carries: TIFF tags (IFD0 and the IFD1 thumbnail directory), the
EXIF private IFD and the GPS IFD. Based on the EXIF 2.32 specification.

Copyright 2025 DNAi inc.
"""

from enum import IntEnum

# Pointer tags in IFD0
EXIF_OFFSET_TAG = 0x8769
GPS_INFO_TAG = 0x8825

TIFF_TAG_NAMES = {
    # ============================================================
    # Image data structure
    # ============================================================
    0x00FE: "NewSubfileType",
    0x00FF: "SubfileType",
    0x0100: "ImageWidth",
    0x0101: "ImageLength",
    0x0102: "BitsPerSample",
    0x0103: "Compression",
    0x0106: "PhotometricInterpretation",
    0x0112: "Orientation",
    0x0115: "SamplesPerPixel",
    0x011C: "PlanarConfiguration",
    0x0212: "YCbCrSubSampling",
    0x0213: "YCbCrPositioning",
    0x011A: "XResolution",
    0x011B: "YResolution",
    0x0128: "ResolutionUnit",
    # ============================================================
    # Recording offset
    # ============================================================
    0x0111: "StripOffsets",
    0x0116: "RowsPerStrip",
    0x0117: "StripByteCounts",
    0x0201: "JPEGInterchangeFormat",
    0x0202: "JPEGInterchangeFormatLength",
    # ============================================================
    # Image data characteristics
    # ============================================================
    0x012D: "TransferFunction",
    0x013E: "WhitePoint",
    0x013F: "PrimaryChromaticities",
    0x0211: "YCbCrCoefficients",
    0x0214: "ReferenceBlackWhite",
    # ============================================================
    # Other tags
    # ============================================================
    0x0132: "DateTime",
    0x010E: "ImageDescription",
    0x010F: "Make",
    0x0110: "Model",
    0x0131: "Software",
    0x013B: "Artist",
    0x013C: "HostComputer",
    0x8298: "Copyright",
    0x02BC: "XMLPacket",
    0x4746: "Rating",
    0x4749: "RatingPercent",
    0x9C9B: "XPTitle",
    0x9C9C: "XPComment",
    0x9C9D: "XPAuthor",
    0x9C9E: "XPKeywords",
    0x9C9F: "XPSubject",
    0xC4A5: "PrintImageMatching",
    # ============================================================
    # Sub-IFD pointers
    # ============================================================
    EXIF_OFFSET_TAG: "ExifOffset",
    GPS_INFO_TAG: "GPSInfo",
}

EXIF_TAG_NAMES = {
    # ============================================================
    # Version
    # ============================================================
    0x9000: "ExifVersion",
    0xA000: "FlashpixVersion",
    # ============================================================
    # Image data characteristics
    # ============================================================
    0xA001: "ColorSpace",
    0xA500: "Gamma",
    # ============================================================
    # Image configuration
    # ============================================================
    0x9101: "ComponentsConfiguration",
    0x9102: "CompressedBitsPerPixel",
    0xA002: "PixelXDimension",
    0xA003: "PixelYDimension",
    # ============================================================
    # User information
    # ============================================================
    0x927C: "MakerNote",
    0x9286: "UserComment",
    0xA004: "RelatedSoundFile",
    # ============================================================
    # Date and time
    # ============================================================
    0x9003: "DateTimeOriginal",
    0x9004: "DateTimeDigitized",
    0x9010: "OffsetTime",
    0x9011: "OffsetTimeOriginal",
    0x9012: "OffsetTimeDigitized",
    0x9290: "SubSecTime",
    0x9291: "SubSecTimeOriginal",
    0x9292: "SubSecTimeDigitized",
    # ============================================================
    # Picture-taking conditions
    # ============================================================
    0x829A: "ExposureTime",
    0x829D: "FNumber",
    0x8822: "ExposureProgram",
    0x8824: "SpectralSensitivity",
    0x8827: "ISOSpeedRatings",
    0x8828: "OECF",
    0x8830: "SensitivityType",
    0x8831: "StandardOutputSensitivity",
    0x8832: "RecommendedExposureIndex",
    0x8833: "ISOSpeed",
    0x8834: "ISOSpeedLatitudeyyy",
    0x8835: "ISOSpeedLatitudezzz",
    0x9201: "ShutterSpeedValue",
    0x9202: "ApertureValue",
    0x9203: "BrightnessValue",
    0x9204: "ExposureBiasValue",
    0x9205: "MaxApertureValue",
    0x9206: "SubjectDistance",
    0x9207: "MeteringMode",
    0x9208: "LightSource",
    0x9209: "Flash",
    0x920A: "FocalLength",
    0x9214: "SubjectArea",
    0xA20B: "FlashEnergy",
    0xA20C: "SpatialFrequencyResponse",
    0xA20E: "FocalPlaneXResolution",
    0xA20F: "FocalPlaneYResolution",
    0xA210: "FocalPlaneResolutionUnit",
    0xA214: "SubjectLocation",
    0xA215: "ExposureIndex",
    0xA217: "SensingMethod",
    0xA300: "FileSource",
    0xA301: "SceneType",
    0xA302: "CFAPattern",
    0xA401: "CustomRendered",
    0xA402: "ExposureMode",
    0xA403: "WhiteBalance",
    0xA404: "DigitalZoomRatio",
    0xA405: "FocalLengthIn35mmFilm",
    0xA406: "SceneCaptureType",
    0xA407: "GainControl",
    0xA408: "Contrast",
    0xA409: "Saturation",
    0xA40A: "Sharpness",
    0xA40B: "DeviceSettingDescription",
    0xA40C: "SubjectDistanceRange",
    # ============================================================
    # Shooting situation
    # ============================================================
    0x9400: "Temperature",
    0x9401: "Humidity",
    0x9402: "Pressure",
    0x9403: "WaterDepth",
    0x9404: "Acceleration",
    0x9405: "CameraElevationAngle",
    # ============================================================
    # Other tags
    # ============================================================
    0xA005: "InteroperabilityOffset",
    0xA420: "ImageUniqueID",
    0xA430: "CameraOwnerName",
    0xA431: "BodySerialNumber",
    0xA432: "LensSpecification",
    0xA433: "LensMake",
    0xA434: "LensModel",
    0xA435: "LensSerialNumber",
}


class GPSTag(IntEnum):
    """GPS IFD tags (0x0000 - 0x001F)"""
    GPSVersionID = 0x0000
    GPSLatitudeRef = 0x0001
    GPSLatitude = 0x0002
    GPSLongitudeRef = 0x0003
    GPSLongitude = 0x0004
    GPSAltitudeRef = 0x0005
    GPSAltitude = 0x0006
    GPSTimeStamp = 0x0007
    GPSSatellites = 0x0008
    GPSStatus = 0x0009
    GPSMeasureMode = 0x000A
    GPSDOP = 0x000B
    GPSSpeedRef = 0x000C
    GPSSpeed = 0x000D
    GPSTrackRef = 0x000E
    GPSTrack = 0x000F
    GPSImgDirectionRef = 0x0010
    GPSImgDirection = 0x0011
    GPSMapDatum = 0x0012
    GPSDestLatitudeRef = 0x0013
    GPSDestLatitude = 0x0014
    GPSDestLongitudeRef = 0x0015
    GPSDestLongitude = 0x0016
    GPSDestBearingRef = 0x0017
    GPSDestBearing = 0x0018
    GPSDestDistanceRef = 0x0019
    GPSDestDistance = 0x001A
    GPSProcessingMethod = 0x001B
    GPSAreaInformation = 0x001C
    GPSDateStamp = 0x001D
    GPSDifferential = 0x001E
    GPSHPositioningError = 0x001F


GPS_TAG_NAMES = {tag.value: tag.name for tag in GPSTag}
